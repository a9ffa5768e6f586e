"""
Butterfly Pattern Printer

Features:
- Reads a single integer N (first whitespace-delimited token)
- Prints a butterfly of '*' and ' ' built from two row groups
- Explicit InvalidInput error with non-zero exit status
- Optional JSON / SVG / PNG export of the rendered grid

Geometry:
    mid_row     = (N + 1) // 2
    upper row j = '*' * j + ' ' * max(0, N + 1 - 2j) + '*' * j        j = 1..mid_row
    lower row j = '*' * (mid_row - j) + ' ' * 2j + '*' * (mid_row - j)  j = 1..mid_row-1

Example (N = 5):
    *    *
    **  **
    ******
    **  **
    *    *
"""

from __future__ import annotations
import json
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Dict, Any, Tuple, TextIO

try:
    import cairosvg
    HAS_CAIROSVG = True
except (ImportError, OSError):
    HAS_CAIROSVG = False


STAR = '*'
BLANK = ' '


# =============================================================================
# 1. INPUT & ERROR HANDLING
# =============================================================================

class ErrorKind(Enum):
    INPUT = auto()
    WARNING = auto()
    INFO = auto()


@dataclass
class Message:
    kind: ErrorKind
    text: str
    hint: Optional[str] = None


class MessageCollector:
    def __init__(self):
        self.errors: List[Message] = []
        self.warnings: List[Message] = []
        self.infos: List[Message] = []

    def error(self, text: str, hint: str = None, kind: ErrorKind = ErrorKind.INPUT):
        self.errors.append(Message(kind, text, hint))

    def warn(self, text: str):
        self.warnings.append(Message(ErrorKind.WARNING, text))

    def info(self, text: str):
        self.infos.append(Message(ErrorKind.INFO, text))

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class InvalidInput(ValueError):
    """The size could not be read as an integer."""

    def __init__(self, text: str, hint: str = "Example: echo 5 | butterfly"):
        super().__init__(text)
        self.message = Message(ErrorKind.INPUT, text, hint)


def read_size(text: str) -> int:
    """Parse the first whitespace-delimited token of ``text`` as N."""
    tokens = text.split()
    if not tokens:
        raise InvalidInput("No size given")

    raw = tokens[0]
    digits = raw[1:] if raw[:1] in ('+', '-') else raw
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    if not digits or not all('0' <= ch <= '9' for ch in digits):
        raise InvalidInput(f"Size must be an integer, got '{raw}'")
    return int(raw)


def read_first_token_line(stream: TextIO) -> str:
    """Return the first line of ``stream`` holding a token, without waiting for EOF."""
    while True:
        line = stream.readline()
        if not line or line.split():
            return line


# =============================================================================
# 2. GEOMETRY
# =============================================================================

def mid_row(n: int) -> int:
    return (n + 1) // 2


@dataclass(frozen=True)
class Segment:
    stars: int
    spaces: int

    def __post_init__(self):
        # Counts never go negative, whatever N was
        object.__setattr__(self, 'stars', max(0, self.stars))
        object.__setattr__(self, 'spaces', max(0, self.spaces))

    @property
    def width(self) -> int:
        return 2 * self.stars + self.spaces

    def text(self) -> str:
        return STAR * self.stars + BLANK * self.spaces + STAR * self.stars


def upper_half(n: int) -> List[Segment]:
    """Rows 1..mid_row; star runs grow while the gap closes."""
    return [Segment(j, (n + 1) - 2 * j) for j in range(1, mid_row(n) + 1)]


def lower_half(n: int) -> List[Segment]:
    """Rows 1..mid_row-1; the gap spans columns N down to N + 1 - 2j."""
    mid = mid_row(n)
    return [Segment(mid - j, n - ((n + 1) - 2 * j) + 1) for j in range(1, mid)]


def segments(n: int) -> List[Segment]:
    return upper_half(n) + lower_half(n)


# =============================================================================
# 3. RENDERING
# =============================================================================

def render(n: int) -> List[str]:
    return [seg.text() for seg in segments(n)]


# =============================================================================
# 4. GENERATION
# =============================================================================

class Generator:
    STYLES = {
        STAR: {'fill': '#F4A300', 'stroke': '#7A4F00'},
        BLANK: {'fill': '#FFFFFF', 'stroke': '#DDDDDD'},
    }

    def __init__(self, size: int, lines: List[str]):
        self.size = size
        self.lines = lines
        width = max((len(line) for line in lines), default=0)
        self.grid = [list(line.ljust(width)) for line in lines]
        self.grid_size = (width, len(lines))
        self.cell_size = 20

    def json(self) -> str:
        return json.dumps({
            'meta': {'size': self.size, 'mid_row': mid_row(self.size),
                     'width': self.grid_size[0], 'height': self.grid_size[1]},
            'lines': self.lines,
            'grid': self.grid
        }, indent=2)

    def svg(self) -> str:
        if not self.grid:
            return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'
        w = self.grid_size[0] * self.cell_size
        h = self.grid_size[1] * self.cell_size

        lines = [f'<?xml version="1.0"?>\n<svg width="{w}" height="{h}" xmlns="http://www.w3.org/2000/svg">']
        for name, ch in (('star', STAR), ('blank', BLANK)):
            st = self.STYLES[ch]
            lines.append(f'<g id="{name}">')
            for r, row in enumerate(self.grid):
                for c, cell in enumerate(row):
                    if cell == ch:
                        x, y = c * self.cell_size, r * self.cell_size
                        lines.append(f'<rect x="{x}" y="{y}" width="{self.cell_size}" height="{self.cell_size}" fill="{st["fill"]}" stroke="{st["stroke"]}" stroke-width="1"/>')
            lines.append('</g>')
        lines.append('</svg>')
        return '\n'.join(lines)

    def png(self, svg_content: str, path: str, scale: int = 2):
        if not HAS_CAIROSVG:
            raise RuntimeError("cairosvg not installed")
        cairosvg.svg2png(bytestring=svg_content.encode(), write_to=path, scale=scale)


# =============================================================================
# 5. DRIVER
# =============================================================================

class PatternRenderer:
    def __init__(self, out: TextIO = None, report: TextIO = None):
        self.out = out if out is not None else sys.stdout
        self.report = report if report is not None else sys.stderr
        self.messages = MessageCollector()

    def _say(self, text: str = ""):
        print(text, file=self.report)

    def run(self, text: str, verbose: bool = False, output_dir: Optional[str] = None) -> Dict[str, Any]:
        self.messages = MessageCollector()
        if verbose:
            self._say("=" * 60)
            self._say("BUTTERFLY PATTERN PRINTER")
            self._say("=" * 60)
            self._say("\n[PHASE 1: INPUT]")

        try:
            n = read_size(text)
        except InvalidInput as e:
            self.messages.error(e.message.text, e.message.hint)
            if verbose:
                self._say(f"  ✗ {e.message.text}")
            raise
        if verbose:
            self._say(f"  ✓ N = {n}")

        if verbose:
            self._say("\n[PHASE 2: GEOMETRY]")
        mid = mid_row(n)
        lines = render(n)
        if n <= 0:
            self.messages.info(f"N = {n}: nothing to draw")
        if verbose:
            self._say(f"  ✓ MidRow = {mid}, {len(lines)} row(s)")
            for i in self.messages.infos:
                self._say(f"    [INFO] {i.text}")

        if verbose:
            self._say("\n[PHASE 3: RENDERING]")
        for line in lines:
            self.out.write(line + '\n')
        self.out.flush()
        if verbose:
            self._say(f"  ✓ {len(lines)} line(s) written")

        files = []
        if output_dir:
            files = self.export(n, lines, output_dir, verbose)

        return {
            'size': n,
            'mid_row': mid,
            'lines': lines,
            'files': files,
            'warnings': [w.text for w in self.messages.warnings]
        }

    def export(self, n: int, lines: List[str], output_dir: str, verbose: bool = False) -> List[str]:
        if verbose:
            self._say("\n[PHASE 4: EXPORT]")
        gen = Generator(n, lines)
        base = os.path.join(output_dir, f'butterfly_{n}')
        svg_out = gen.svg()

        written = []
        with open(f'{base}.json', 'w') as f:
            f.write(gen.json())
        written.append(f'{base}.json')
        with open(f'{base}.svg', 'w') as f:
            f.write(svg_out)
        written.append(f'{base}.svg')
        if HAS_CAIROSVG:
            gen.png(svg_out, f'{base}.png')
            written.append(f'{base}.png')
        else:
            self.messages.warn("cairosvg not installed, PNG skipped")

        if verbose:
            for path in written:
                self._say(f"  ✓ {path}")
            for w in self.messages.warnings:
                self._say(f"    [WARN] {w.text}")
        return written


# =============================================================================
# 6. TESTS & MAIN
# =============================================================================

def run_tests() -> Tuple[int, int]:
    """Built-in test table: (name, input text, should_pass, expected lines)."""

    tests = [
        # Known shapes
        ("Shape: N=1", "1", True, ["**"]),
        ("Shape: N=2", "2", True, ["* *"]),
        ("Shape: N=3", "3", True, ["*  *", "****", "*  *"]),
        ("Shape: N=4", "4", True, ["*   *", "** **", "*  *"]),
        ("Shape: N=5", "5", True, ["*    *", "**  **", "******", "**  **", "*    *"]),

        # Empty output
        ("Empty: Zero", "0", True, []),
        ("Empty: Negative", "-1", True, []),
        ("Empty: Large negative", "-100", True, []),

        # Input forms
        ("Input: Surrounding whitespace", "  3 \n", True, ["*  *", "****", "*  *"]),
        ("Input: Extra tokens ignored", "1 2 3", True, ["**"]),
        ("Input: Plus sign", "+1", True, ["**"]),
        ("Input: Newline separated", "\n\n1\n", True, ["**"]),

        # Invalid input
        ("Invalid: Empty", "", False, None),
        ("Invalid: Whitespace only", "  \n\t", False, None),
        ("Invalid: Word", "five", False, None),
        ("Invalid: Float", "2.5", False, None),
        ("Invalid: Trailing letters", "5abc", False, None),
        ("Invalid: Lone sign", "-", False, None),
        ("Invalid: Superscript digit", "²", False, None),
    ]

    print("\n" + "=" * 70)
    print("TEST SUITE")
    print("=" * 70)

    categories: Dict[str, list] = {}
    for test in tests:
        categories.setdefault(test[0].split(":")[0], []).append(test)

    total_passed = total_failed = 0
    failed_tests = []

    for cat_name, cat_tests in categories.items():
        print(f"\n[{cat_name}]")
        cat_passed = cat_failed = 0

        for name, text, should_pass, expected in cat_tests:
            try:
                lines = render(read_size(text))
                passed = True
            except InvalidInput:
                lines = None
                passed = False

            ok = passed == should_pass and (expected is None or lines == expected)
            if ok:
                print(f"  ✓ {name}")
                cat_passed += 1
            else:
                print(f"  ✗ {name}")
                print(f"      Expected: {expected!r}, Got: {lines!r}")
                cat_failed += 1
                failed_tests.append(name)

        total_passed += cat_passed
        total_failed += cat_failed
        print(f"  [{cat_passed}/{cat_passed + cat_failed} passed]")

    print("\n" + "=" * 70)
    print(f"TOTAL: {total_passed}/{total_passed + total_failed} tests passed")
    if failed_tests:
        print(f"\nFailed tests:")
        for t in failed_tests:
            print(f"  - {t}")
    print("=" * 70)

    return total_passed, total_failed


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    p = argparse.ArgumentParser(description='Butterfly pattern printer')
    p.add_argument('--test', action='store_true')
    p.add_argument('--input', type=str, help='read N from a file instead of stdin')
    p.add_argument('--output-dir', type=str, help='also write JSON/SVG/PNG here')
    p.add_argument('--verbose', action='store_true')
    args = p.parse_args(argv)

    if args.test:
        _, failed = run_tests()
        return 1 if failed else 0

    if args.input:
        try:
            with open(args.input) as f:
                text = read_first_token_line(f)
        except OSError as e:
            p.error(f"cannot read --input {args.input}: {e.strerror or e}")
    else:
        text = read_first_token_line(sys.stdin)

    try:
        PatternRenderer().run(text, verbose=args.verbose, output_dir=args.output_dir)
    except InvalidInput as e:
        print(f"error: {e.message.text}", file=sys.stderr)
        if e.message.hint:
            print(f"  hint: {e.message.hint}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
