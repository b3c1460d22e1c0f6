import base64
import unittest
from types import SimpleNamespace

from fitnosh_generator.imaging.gemini_client import parts_from_response
from tests.helpers import png_bytes


def _part(text=None, data=None, mime_type="image/png"):
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(text=text, inline_data=inline)


def _response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


class TestPartsFromResponse(unittest.TestCase):

    def test_bytes_inline_data_is_kept(self):
        image = png_bytes()
        parts = parts_from_response(_response(_part(text="A flat lay."), _part(data=image)))
        self.assertEqual(parts[0].text, "A flat lay.")
        self.assertEqual(parts[1].image_data, image)
        self.assertEqual(parts[1].mime_type, "image/png")

    def test_base64_string_inline_data_is_decoded(self):
        image = png_bytes()
        encoded = base64.b64encode(image).decode("ascii")
        parts = parts_from_response(_response(_part(data=encoded)))
        self.assertEqual(parts[0].image_data, image)

    def test_empty_inline_data_is_skipped(self):
        self.assertEqual(parts_from_response(_response(_part(data=b""))), [])

    def test_missing_candidates(self):
        self.assertEqual(parts_from_response(SimpleNamespace(candidates=None)), [])
        self.assertEqual(parts_from_response(SimpleNamespace(candidates=[])), [])

    def test_missing_content_or_parts(self):
        no_content = SimpleNamespace(candidates=[SimpleNamespace(content=None)])
        no_parts = SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=None))])
        self.assertEqual(parts_from_response(no_content), [])
        self.assertEqual(parts_from_response(no_parts), [])


if __name__ == "__main__":
    unittest.main()
