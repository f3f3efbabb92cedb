from io import BytesIO
from typing import Any, Dict, List, Optional

import pytest

PRODUCT_HEADER = ["상품ID", "상품명칭", "가격", "재고수량"]

PRODUCT_ROWS = [
    ["1001", "노트북", "1500000", "10"],
    ["1002", "키보드, 무선", "55000", "25"],
    ["1003", 'USB 허브 "고급형"', "32000", "40"],
    ["1004", "모니터", "420000", "7"],
    ["1005", "마우스", "18000", "100"],
]

PRODUCT_MAPPING = {
    "상품ID": "productId",
    "상품명칭": "productName",
    "가격": "price",
    "재고수량": "stock",
}


@pytest.fixture
def product_grid() -> List[List[Any]]:
    return [list(PRODUCT_HEADER)] + [list(r) for r in PRODUCT_ROWS]


@pytest.fixture
def product_mapping() -> Dict[str, str]:
    return dict(PRODUCT_MAPPING)


@pytest.fixture
def make_xlsx():
    """Build an in-memory workbook: {sheet title: rows}."""
    from openpyxl import Workbook

    def _make(sheets: Dict[str, List[List[Any]]], *, cells: Optional[Dict[str, Dict[str, Any]]] = None) -> bytes:
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for r, row in enumerate(rows, start=1):
                for c, value in enumerate(row, start=1):
                    if value is not None:
                        ws.cell(row=r, column=c, value=value)
            for ref, value in (cells or {}).get(title, {}).items():
                ws[ref] = value
        bio = BytesIO()
        wb.save(bio)
        return bio.getvalue()

    return _make
