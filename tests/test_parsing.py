import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.errors import UnsupportedFileTypeError  # noqa: E402
from app.parsing.parse import (  # noqa: E402
    DOCX_MIME_TYPE,
    extract_text_from_upload,
    parse_document,
    resolve_source_type,
)


class UploadContractTests(unittest.TestCase):
    def test_plain_text_is_decoded_and_normalized(self):
        parsed = extract_text_from_upload("cv.txt", "text/plain; charset=utf-8", b"\xef\xbb\xbfLine one\r\n- Bullet\r\n")
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.text, "Line one\n- Bullet\n")
        self.assertFalse(parsed.is_placeholder)
        self.assertEqual(parsed.parsing_warnings, [])

    def test_invalid_utf8_is_replaced_with_warning(self):
        parsed = extract_text_from_upload("cv.txt", "text/plain", b"caf\xe9")
        self.assertEqual(parsed.text, "caf\ufffd")
        self.assertEqual(len(parsed.parsing_warnings), 1)

    def test_pdf_and_docx_get_placeholder_text(self):
        for filename, content_type, source_type in (
            ("resume.pdf", "application/pdf", "pdf"),
            ("resume.docx", DOCX_MIME_TYPE, "docx"),
        ):
            parsed = extract_text_from_upload(filename, content_type, b"%PDF-1.4 binary")
            self.assertEqual(parsed.source_type, source_type)
            self.assertTrue(parsed.is_placeholder)
            self.assertEqual(
                parsed.text,
                f"This is placeholder text for {filename}. "
                "In a real application, we would extract text from the PDF or DOCX file.",
            )

    def test_generic_content_type_falls_back_to_extension(self):
        self.assertEqual(resolve_source_type("resume.DOCX", "application/octet-stream"), "docx")
        self.assertEqual(resolve_source_type("notes.txt", None), "txt")

    def test_unsupported_types_are_rejected(self):
        with self.assertRaises(UnsupportedFileTypeError) as ctx:
            extract_text_from_upload("photo.png", "image/png", b"\x89PNG")
        self.assertEqual(str(ctx.exception), "Please upload a PDF, DOCX, or TXT file.")
        with self.assertRaises(ValueError):
            resolve_source_type("resume.txt", "image/png")
        with self.assertRaises(ValueError):
            resolve_source_type("resume.rtf", "")

    def test_doc_id_is_stable(self):
        first = extract_text_from_upload("a.txt", "text/plain", b"same text")
        second = extract_text_from_upload("b.txt", "text/plain", b"same text")
        self.assertEqual(first.doc_id, second.doc_id)


class ParsingFacadeTests(unittest.TestCase):
    def test_parse_txt_returns_stable_parsed_doc(self):
        content = "Line one\n- Bullet item\nLine three"
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(content)
            tmp_file.close()

            parsed = parse_document(str(tmp_path))
            self.assertEqual(parsed.source_type, "txt")
            self.assertEqual(parsed.text, content)
            self.assertEqual(parsed.filename, tmp_path.name)
            self.assertTrue(parsed.doc_id)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def test_parse_pdf_does_not_read_content(self):
        tmp_file = tempfile.NamedTemporaryFile("wb", suffix=".pdf", delete=False)
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(b"%PDF-1.4")
            tmp_file.close()

            parsed = parse_document(str(tmp_path))
            self.assertTrue(parsed.is_placeholder)
            self.assertIn(tmp_path.name, parsed.text)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            parse_document("/nonexistent/resume.txt")


if __name__ == "__main__":
    unittest.main()
