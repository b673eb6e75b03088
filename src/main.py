import argparse
import logging
import os
import sys

# Add src directory to sys.path to handle modular imports
SRC_DIR = os.path.dirname(os.path.abspath(__file__))
if SRC_DIR not in sys.path:
    sys.path.append(SRC_DIR)

from core.render_options import GobanRange, GobanStyle, MakeSvgOptions, NodeDescription
from services.diagram_service import make_svg
from utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a Go board position from an SGF file as SVG.")
    parser.add_argument("input", help="SGF file ('-' for stdin)")
    parser.add_argument("-o", "--output", help="output SVG file (default: stdout)")
    parser.add_argument("--options", help="JSON file with rendering options")

    node = parser.add_mutually_exclusive_group()
    node.add_argument("-n", "--node-number", type=int, help="node number on the main line (0 = root)")
    node.add_argument("--last", action="store_true", help="render the last node of the main line")
    node.add_argument("--path", help="comma separated child indices from the root, e.g. 0,1,0")

    rng = parser.add_mutually_exclusive_group()
    rng.add_argument("-r", "--range", dest="goban_range", help="half-open range 'x0:x1,y0:y1'")
    rng.add_argument("--shrink-wrap", action="store_true", help="crop to the occupied region")

    parser.add_argument("--style", choices=[s.value for s in GobanStyle])
    parser.add_argument("-w", "--width", type=float, help="viewbox width")
    parser.add_argument("--no-board-labels", action="store_true", help="omit edge coordinates")
    parser.add_argument("--move-numbers", nargs="?", type=int, const=1, metavar="FIRST",
                        help="draw move numbers, starting from FIRST (default 1)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def options_from_args(args: argparse.Namespace) -> MakeSvgOptions:
    """--options で指定されたファイル (あれば) を読み込み、コマンドライン引数で上書きする"""
    base = MakeSvgOptions.load(args.options) if args.options else MakeSvgOptions()

    overrides = {}
    if args.node_number is not None:
        overrides["node_description"] = NodeDescription(number=args.node_number)
    elif args.last:
        overrides["node_description"] = NodeDescription(last=True)
    elif args.path:
        overrides["node_description"] = NodeDescription(path=[int(i) for i in args.path.split(",")])
    if args.goban_range:
        overrides["goban_range"] = GobanRange.parse(args.goban_range)
    elif args.shrink_wrap:
        overrides["goban_range"] = GobanRange.shrink_wrap()
    if args.style:
        overrides["style"] = GobanStyle(args.style)
    if args.width is not None:
        overrides["viewbox_width"] = args.width
    if args.no_board_labels:
        overrides["draw_board_labels"] = False
    if args.move_numbers is not None:
        overrides["draw_move_numbers"] = True
        overrides["first_move_number"] = args.move_numbers
    return base.model_copy(update=overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logger.set_level(logging.DEBUG)

    try:
        options = options_from_args(args)
        if args.input == "-":
            sgf_text = sys.stdin.buffer.read()
        else:
            with open(args.input, "rb") as f:
                sgf_text = f.read()
        svg = make_svg(sgf_text, options)
    except (ValueError, OSError) as e:
        logger.error(str(e), layer="CLI")
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        logger.info(f"Wrote {args.output}", layer="CLI")
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
