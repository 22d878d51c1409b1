"""Excel export helpers."""
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from ..models.payout_schemas import PayoutBreakdown

logger = logging.getLogger(__name__)

BREAKDOWN_COLUMNS = list(PayoutBreakdown.model_fields)
MONEY_COLUMNS = [c for c in BREAKDOWN_COLUMNS if c not in ("attainment", "bundle_pct")]


def breakdown_frame(payouts: Dict[str, PayoutBreakdown]) -> pd.DataFrame:
    """One row per rep, one column per breakdown field."""
    rows = [{"rep": rep, **b.model_dump()} for rep, b in payouts.items()]
    return pd.DataFrame(rows, columns=["rep"] + BREAKDOWN_COLUMNS)


def generate_workbook(result: Dict[str, Any], output_path: Optional[Path] = None) -> bytes:
    """Write a roster simulation result to an ``.xlsx`` workbook.

    Sheets:
        Payouts: the breakdown for each rep.
        Summary: rep count and total payout.

    Returns:
        bytes of the Excel workbook

    Raises:
        ValueError: If the result holds no reps.
    """
    if not result.get("payouts"):
        raise ValueError("performance must contain at least one rep")
    payouts = breakdown_frame(result["payouts"])
    summary = pd.DataFrame(
        [
            {"metric": "reps", "value": len(payouts)},
            {"metric": "total_payout", "value": result.get("total_payout", 0.0)},
        ]
    )

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        payouts.to_excel(writer, sheet_name="Payouts", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)

        ws = writer.sheets["Payouts"]
        header = [cell.value for cell in next(ws.rows)]
        for name in MONEY_COLUMNS:
            col_idx = header.index(name) + 1
            for row in ws.iter_rows(min_row=2, min_col=col_idx, max_col=col_idx):
                for cell in row:
                    cell.number_format = "#,##0.00"

    workbook_bytes = buffer.getvalue()

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(workbook_bytes)
        logger.info("Payout workbook written to %s", output_path)

    return workbook_bytes
