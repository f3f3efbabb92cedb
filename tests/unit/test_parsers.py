import httpx
import pytest

from sheet_to_json import (
    CsvParseOptions,
    ExcelSheetToJson,
    GoogleSheetConfig,
    MissingSheetNameError,
    ParseOptions,
    SheetFetchError,
    SheetNotFoundError,
    parse,
    parse_csv,
    parse_google_sheet,
    parse_tabular_data,
)
from sheet_to_json.connectors.google_sheets.service import GoogleSheetsService

PRODUCT_CSV = (
    "상품ID,상품명칭,가격,재고수량\r\n"
    "1001,노트북,1500000,10\r\n"
    '1002,"키보드, 무선",55000,25\r\n'
    '1003,"USB 허브 ""고급형""",32000,40\r\n'
    "\r\n"
    "1004,모니터,420000,7\r\n"
    "1005,마우스,18000,100\r\n"
)


class TestParseCsv:
    def test_product_csv(self, product_mapping):
        out = parse_csv(PRODUCT_CSV.encode("utf-8"), CsvParseOptions(header_name_to_key=product_mapping))

        assert len(out.body) == 5
        assert out.body[0] == {"productId": 1001, "productName": "노트북", "price": 1500000, "stock": 10}
        assert out.body[1]["productName"] == "키보드, 무선"
        assert out.body[2]["productName"] == 'USB 허브 "고급형"'

    def test_blank_line_does_not_shift_body_offset(self):
        raw = "제목\n\n이름,나이\n홍길동,30\n".encode("utf-8")
        out = parse_csv(
            raw,
            {
                "headerStartRowNumber": 3,
                "bodyStartRowNumber": 4,
                "headerNameToKey": {"이름": "name", "나이": "age"},
            },
        )
        assert out.body == [{"name": "홍길동", "age": 30}]

    def test_semicolon_delimiter_cp949(self):
        raw = "상품ID;가격\n1001;55000\n".encode("cp949")
        out = parse_csv(
            raw,
            CsvParseOptions(
                delimiter=";",
                encoding="cp949",
                header_name_to_key={"상품ID": "productId", "가격": "price"},
                cast_number=False,
            ),
        )
        assert out.body == [{"productId": "1001", "price": "55000"}]

    def test_plain_parse_options_are_upgraded(self, product_mapping):
        out = parse_csv(PRODUCT_CSV.encode("utf-8"), ParseOptions(header_name_to_key=product_mapping))
        assert len(out.body) == 5


class TestParseExcel:
    def test_product_workbook(self, make_xlsx, product_grid, product_mapping):
        data = make_xlsx({"상품목록": product_grid})
        out = parse(data, ParseOptions(header_name_to_key=product_mapping))

        assert out.origin_header_names == ["상품ID", "상품명칭", "가격", "재고수량"]
        assert len(out.body) == 5
        assert out.body[0] == {"productId": 1001, "productName": "노트북", "price": 1500000, "stock": 10}

    def test_numeric_cells_without_cast(self, make_xlsx):
        data = make_xlsx({"S": [["ID", "가격"], [1001, 55000.0]]})
        out = parse(data, ParseOptions(header_name_to_key={"ID": "id", "가격": "price"}, cast_number=False))
        assert out.body == [{"id": "1001", "price": "55000"}]

    def test_row_numbers_count_from_declared_range(self, make_xlsx):
        data = make_xlsx({"S": []}, cells={"S": {"B3": "ID", "B4": 7}})
        out = parse(data, ParseOptions(header_name_to_key={"ID": "id"}))
        assert out.body == [{"id": 7}]

    def test_blank_rows_inside_range_keep_positions(self, make_xlsx):
        data = make_xlsx({"S": [["Title"], [None], ["ID"], ["7"]]})
        out = parse(data, ParseOptions(header_start_row_number=3, body_start_row_number=4, header_name_to_key={"ID": "id"}))
        assert out.body == [{"id": 7}]

    def test_named_sheet(self, make_xlsx):
        data = make_xlsx({"A": [["ID"], ["1"]], "B": [["ID"], ["2"]]})
        out = parse(data, ParseOptions(sheet_name="B", header_name_to_key={"ID": "id"}))
        assert out.body == [{"id": 2}]

    def test_unknown_sheet(self, make_xlsx):
        data = make_xlsx({"A": [["ID"]], "B": [["ID"]]})
        with pytest.raises(SheetNotFoundError) as exc:
            parse(data, ParseOptions(sheet_name="C", header_name_to_key={"ID": "id"}))
        assert "'A', 'B'" in str(exc.value)


def _google_service(payload, status=200, calls=None) -> GoogleSheetsService:
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status, json=payload)

    return GoogleSheetsService(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestParseGoogleSheet:
    @pytest.mark.asyncio
    async def test_product_sheet(self, product_grid, product_mapping):
        svc = _google_service({"values": product_grid})
        out = await parse_google_sheet(
            GoogleSheetConfig(spreadsheet_id="sheet-id", api_key="key"),
            ParseOptions(sheet_name="시트1", header_name_to_key=product_mapping),
            service=svc,
        )
        await svc._client.aclose()

        assert len(out.body) == 5
        assert out.body[0] == {"productId": 1001, "productName": "노트북", "price": 1500000, "stock": 10}

    @pytest.mark.asyncio
    async def test_missing_sheet_name_raises_before_request(self, product_mapping):
        calls = []
        svc = _google_service({"values": []}, calls=calls)
        with pytest.raises(MissingSheetNameError):
            await parse_google_sheet(
                {"spreadsheetId": "sheet-id", "apiKey": "key"},
                {"headerNameToKey": product_mapping},
                service=svc,
            )
        await svc._client.aclose()
        assert calls == []

    @pytest.mark.asyncio
    async def test_http_failure(self, product_mapping):
        svc = _google_service({"error": {}}, status=403)
        with pytest.raises(SheetFetchError) as exc:
            await parse_google_sheet(
                GoogleSheetConfig(spreadsheet_id="sheet-id"),
                ParseOptions(sheet_name="Sheet1", header_name_to_key=product_mapping),
                service=svc,
            )
        await svc._client.aclose()
        assert "403" in str(exc.value)

    @pytest.mark.asyncio
    async def test_empty_sheet(self, product_mapping):
        svc = _google_service({"range": "Sheet1!A1:Z1000"})
        out = await parse_google_sheet(
            GoogleSheetConfig.from_url("https://docs.google.com/spreadsheets/d/1abcXYZ/edit#gid=0"),
            ParseOptions(sheet_name="Sheet1", header_name_to_key=product_mapping),
            service=svc,
        )
        await svc._client.aclose()
        assert out.model_dump() == {"origin_header_names": [], "fields": [], "header": {}, "body": []}


def test_default_bundle_exposes_parsers():
    assert ExcelSheetToJson.parse is parse
    assert ExcelSheetToJson.parse_csv is parse_csv
    assert ExcelSheetToJson.parse_google_sheet is parse_google_sheet
    assert ExcelSheetToJson.parse_tabular_data is parse_tabular_data
