"""
Report writer — renders a ScanResult as text.
Never re-orders or re-filters groups: every such decision belongs to the core.
"""
from typing import TextIO

from rich.console import Console
from rich.text import Text

from namesake.core.models import ScanResult, FileRecord
from namesake.utils.convert_utils import ConvertUtils


class ReportWriter:
    """
    Writes duplicate groups to a stream.

    Args:
        stream: Destination (stdout or an output file opened for appending)
        verbose: Adds group headers and size/time (and hash) per file
        color: Colours each line along a green -> red ramp inside its group
    """

    def __init__(self, stream: TextIO, verbose: bool = True, color: bool = True):
        self.verbose = verbose
        self.color = color
        self.console = Console(
            file=stream,
            color_system="auto" if color else None,
            no_color=not color,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def write(self, result: ScanResult) -> None:
        for group in result:
            length = len(group.files)
            if self.verbose:
                self.console.print(Text(f"{group.name}:", style="bold"))

            for index, file in enumerate(group.files):
                line = self.format_file(file, strict=result.strict)
                if self.color:
                    r, g, b = ConvertUtils.ramp_color(index, length)
                    self.console.print(Text(line, style=f"rgb({r},{g},{b})"))
                else:
                    self.console.print(line)
            self.console.print()

    def format_file(self, file: FileRecord, strict: bool = False) -> str:
        line = file.path
        if self.verbose:
            modified = ConvertUtils.timestamp_to_human(file.modified_time)
            line += f" ({file.size}b) - Modified on: {modified}"
            if strict:
                line += f" - Hash: {file.content_hash}"
        return line

    def write_totals(self, result: ScanResult) -> None:
        self.console.print(
            Text(f"Total files: {result.total_files} (with {result.duplicate_groups} uniques)", style="bold"))
