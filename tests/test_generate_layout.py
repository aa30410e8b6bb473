"""End-to-end runs of the layout generator CLI."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest.mock import patch

import generate_layout
from generate_layout import GeneratorOptions, run
from layout_system import LayoutBuffer


class GenerateLayoutTests(unittest.TestCase):
    def test_stdout_carries_only_the_document(self):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stderr(err):
            code = run(GeneratorOptions(check=True, summary=True), stdout=out)
        self.assertEqual(code, 0)
        data = json.loads(out.getvalue())
        self.assertEqual(len(data), 3072)
        self.assertEqual(sum(1 for record in data if record is not None), 2592)
        self.assertIn("Layout check passed", err.getvalue())
        self.assertIn("2592", err.getvalue())

    def test_output_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "layouts" / "window6x12.json"
            with redirect_stderr(io.StringIO()):
                code = run(GeneratorOptions(output=str(path), indent=1))
            self.assertEqual(code, 0)
            data = json.loads(path.read_text(encoding="utf-8"))
        self.assertEqual(len(data), 3072)

    def test_failed_check_skips_output(self):
        out = io.StringIO()
        err = io.StringIO()
        with patch.object(generate_layout, "build_installation", return_value=LayoutBuffer(10)):
            with redirect_stderr(err):
                code = run(GeneratorOptions(check=True), stdout=out)
        self.assertEqual(code, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("Layout check failed", err.getvalue())

    def test_main_exit_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "window.json"
            with redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    generate_layout.main(["--check", "-o", str(path)])
            self.assertEqual(ctx.exception.code, 0)
            self.assertTrue(path.exists())


if __name__ == "__main__":
    unittest.main()
