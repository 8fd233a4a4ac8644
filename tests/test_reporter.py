"""
Tests for ReportWriter — formatting of groups, colour ramp and read-only use of results.
"""
import io
from namesake import ReportWriter, ScanResult, NameGroup, FileRecord
from namesake.utils.convert_utils import ConvertUtils


def make_result(strict=False):
    files = [
        FileRecord(path="/new/a.txt", size=10, modified_time=200, content_hash="abc" if strict else None),
        FileRecord(path="/old/a.txt", size=10, modified_time=100, content_hash="abc" if strict else None),
    ]
    other = [
        FileRecord(path="/p/z.bin", size=3, modified_time=5, content_hash="def" if strict else None),
        FileRecord(path="/q/z.bin", size=3, modified_time=5, content_hash="def" if strict else None),
        FileRecord(path="/r/z.bin", size=3, modified_time=5, content_hash="def" if strict else None),
    ]
    return ScanResult(groups={
        "a.txt": NameGroup(name="a.txt", files=files),
        "z.bin": NameGroup(name="z.bin", files=other),
    }, strict=strict)


class TestReportWriter:

    def test_plain_output(self):
        stream = io.StringIO()
        ReportWriter(stream, verbose=False, color=False).write(make_result())

        assert stream.getvalue().splitlines() == [
            "/new/a.txt", "/old/a.txt", "",
            "/p/z.bin", "/q/z.bin", "/r/z.bin", "",
        ]

    def test_verbose_output_has_headers_and_metadata(self):
        stream = io.StringIO()
        ReportWriter(stream, verbose=True, color=False).write(make_result())

        lines = stream.getvalue().splitlines()
        assert lines[0] == "a.txt:"
        assert lines[1] == f"/new/a.txt (10b) - Modified on: {ConvertUtils.timestamp_to_human(200)}"
        assert "Hash" not in stream.getvalue()
        assert "z.bin:" in lines

    def test_strict_verbose_shows_hash(self):
        stream = io.StringIO()
        ReportWriter(stream, verbose=True, color=False).write(make_result(strict=True))
        assert " - Hash: abc" in stream.getvalue()
        assert " - Hash: def" in stream.getvalue()

    def test_totals(self):
        stream = io.StringIO()
        ReportWriter(stream, verbose=True, color=False).write_totals(make_result())
        assert stream.getvalue() == "Total files: 5 (with 2 uniques)\n"

    def test_does_not_modify_result(self):
        result = make_result()
        before = {name: [f.path for f in g.files] for name, g in result.groups.items()}

        ReportWriter(io.StringIO(), verbose=True, color=True).write(result)

        assert {name: [f.path for f in g.files] for name, g in result.groups.items()} == before

    def test_no_escape_codes_without_color(self):
        stream = io.StringIO()
        ReportWriter(stream, verbose=True, color=False).write(make_result())
        assert "\x1b[" not in stream.getvalue()
