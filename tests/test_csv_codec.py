"""
Tests for CSV parsing and export.
"""
import io
import unittest

from fastapi import UploadFile
from starlette.datastructures import Headers

from content_validator.core.error_handling import InputError
from content_validator.models.record_models import ContentRecord, ReviewState, ReviewStatus, ReviewedRecord
from content_validator.services import csv_codec


def _reviewed(index, row, status=ReviewStatus.PENDING, confidence=0.0, issues=None):
    return ReviewedRecord(
        record=ContentRecord.from_row(index, row),
        review=ReviewState(status=status, confidence=confidence, message="msg", issues=issues or []),
    )


class TestParseCsv(unittest.TestCase):
    """Test cases for csv_codec.parse_csv."""

    def test_headers_and_string_rows(self):
        parsed = csv_codec.parse_csv(b"url,title,views\nhttps://a.test,First,0012\n")

        self.assertEqual(parsed.headers, ["url", "title", "views"])
        self.assertEqual(parsed.rows, [{"url": "https://a.test", "title": "First", "views": "0012"}])

    def test_header_names_trimmed(self):
        parsed = csv_codec.parse_csv(b" title , content \nA,B\n")
        self.assertEqual(parsed.headers, ["title", "content"])

    def test_quoted_fields(self):
        parsed = csv_codec.parse_csv(b'title,content\n"Hello, ""World""","line one\nline two"\n')

        self.assertEqual(parsed.rows[0]["title"], 'Hello, "World"')
        self.assertEqual(parsed.rows[0]["content"], "line one\nline two")

    def test_empty_cells_stay_empty_strings(self):
        parsed = csv_codec.parse_csv(b"title,content,url\nNA,,\nnull,x\n")

        self.assertEqual(parsed.rows[0], {"title": "NA", "content": "", "url": ""})
        self.assertEqual(parsed.rows[1], {"title": "null", "content": "x", "url": ""})

    def test_all_empty_row_kept_blank_lines_skipped(self):
        parsed = csv_codec.parse_csv(b"title,content\nA,B\n\n,\nC,D\n")

        self.assertEqual(len(parsed.rows), 3)
        records = parsed.to_records()
        self.assertTrue(records[1].is_blank)
        self.assertEqual([r.record_id for r in records], ["1", "2", "3"])

    def test_utf8_bom_stripped(self):
        parsed = csv_codec.parse_csv(b"\xef\xbb\xbftitle\nCaf\xc3\xa9\n")

        self.assertEqual(parsed.headers, ["title"])
        self.assertEqual(parsed.rows[0]["title"], "Café")

    def test_empty_document_rejected(self):
        for content in (b"", b"   \n\n"):
            with self.assertRaises(InputError) as ctx:
                csv_codec.parse_csv(content)
            self.assertEqual(str(ctx.exception), "No valid data found in CSV")

    def test_header_only_rejected(self):
        with self.assertRaises(InputError):
            csv_codec.parse_csv(b"title,content\n")

    def test_malformed_rows_rejected(self):
        with self.assertRaises(InputError) as ctx:
            csv_codec.parse_csv(b"a,b\n1,2\n3,4,5,6\n")
        self.assertTrue(str(ctx.exception).startswith("Error parsing CSV"))

    def test_duplicate_columns_after_trim_rejected(self):
        with self.assertRaises(InputError):
            csv_codec.parse_csv(b"title, title\nA,B\n")


class TestReadUpload(unittest.IsolatedAsyncioTestCase):

    def _upload(self, content, filename, content_type="text/csv"):
        return UploadFile(
            file=io.BytesIO(content),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    async def test_csv_upload_parsed(self):
        parsed = await csv_codec.read_upload(self._upload(b"title\nHello\n", "data.csv"))
        self.assertEqual(parsed.rows, [{"title": "Hello"}])

    async def test_non_csv_rejected(self):
        with self.assertRaises(InputError) as ctx:
            await csv_codec.read_upload(self._upload(b"%PDF-1.4", "report.pdf", "application/pdf"))
        self.assertEqual(str(ctx.exception), "Please upload a CSV file")

    async def test_csv_name_with_wrong_content_type_rejected(self):
        with self.assertRaises(InputError):
            await csv_codec.read_upload(self._upload(b"title\nHello\n", "data.csv", "image/png"))


class TestExportCsv(unittest.TestCase):
    """Test cases for csv_codec.export_csv."""

    def test_every_cell_quoted_and_quotes_doubled(self):
        records = [_reviewed(0, {"title": 'say "hi"', "content": "a, b"})]

        output = csv_codec.export_csv(records)

        self.assertEqual(output, '"title","content"\n"say ""hi""","a, b"\n')

    def test_header_is_union_of_columns_in_first_seen_order(self):
        records = [
            _reviewed(0, {"title": "A", "url": "https://a.test"}),
            _reviewed(1, {"author": "X", "title": "B"}),
        ]

        output = csv_codec.export_csv(records)

        self.assertEqual(
            output.splitlines(),
            ['"title","url","author"', '"A","https://a.test",""', '"B","","X"'],
        )

    def test_review_fields_not_exported_by_default(self):
        records = [_reviewed(0, {"title": "A"}, status=ReviewStatus.APPROVED, confidence=1.0)]

        header = csv_codec.export_csv(records).splitlines()[0]

        self.assertEqual(header, '"title"')

    def test_review_fields_appended_on_request(self):
        records = [
            _reviewed(0, {"title": "A"}, status=ReviewStatus.REJECTED, confidence=0.25,
                      issues=["first issue", "second issue"]),
        ]

        lines = csv_codec.export_csv(records, include_review=True).splitlines()

        self.assertEqual(
            lines[0],
            '"title","id","status","confidence","message","issues","imported_at"',
        )
        self.assertTrue(lines[1].startswith('"A","1","rejected","0.2500","msg","first issue; second issue","'))

    def test_explicit_header_order(self):
        records = [_reviewed(0, {"title": "A", "url": "u"})]
        output = csv_codec.export_csv(records, headers=["url", "title"])
        self.assertEqual(output, '"url","title"\n"u","A"\n')

    def test_export_then_parse_preserves_values(self):
        rows = [{"title": 'Quote "me"', "content": "comma, inside"}, {"title": "plain", "content": ""}]
        records = [_reviewed(i, row) for i, row in enumerate(rows)]

        parsed = csv_codec.parse_csv(csv_codec.export_csv(records).encode("utf-8"))

        self.assertEqual(parsed.rows, rows)


if __name__ == '__main__':
    unittest.main()
