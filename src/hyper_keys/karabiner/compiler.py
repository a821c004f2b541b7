from __future__ import annotations

from pathlib import Path
import argparse
import logging

from hyper_keys.layers.frontend import LayoutFrontend

from .backend import HyperBackend
from .writer import write_document

logger = logging.getLogger(__name__)


def compile_layout_file(
    in_path: str | Path,
    out_path: str | Path | None = None,
    *,
    indent: int | None = 2,
) -> Path:
    """End-to-end compilation: TOML layout -> karabiner.json.

    `out_path` overrides the `[output] path` of the layout file. Nothing is
    written unless the whole layout compiles.
    """

    frontend = LayoutFrontend()
    layout, config = frontend.load(in_path)

    rules = HyperBackend().compile(layout)

    settings = config.output
    if out_path is not None:
        settings = settings.model_copy(update={"path": Path(out_path)})
    return write_document(rules, settings, indent=indent)


def _indent(value: str) -> int:
    try:
        indent = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent: {value!r}") from None
    if indent < 0:
        raise argparse.ArgumentTypeError(f"indent must be >= 0, got {indent}")
    return indent


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hyper-keys",
        description="Generate karabiner.json from a Hyper key layout toml.",
    )
    parser.add_argument("layout", help="Layout toml path (e.g. layout.toml)")
    parser.add_argument("-o", "--out", help="Output path (default: [output] path, else karabiner.json)")
    parser.add_argument("--indent", type=_indent, default=2, help="JSON indent (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        compile_layout_file(args.layout, args.out, indent=args.indent)
    except (ValueError, OSError) as exc:
        logger.error("failed to compile %s: %s", args.layout, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
