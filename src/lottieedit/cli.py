# cli.py
# command line for checking and recoloring Lottie files

import argparse
import sys
from pathlib import Path

from .colors import extract_colors_from_layer, extract_document_colors
from .config import APP_VERSION, CLI_NAME
from .edits import layer_summaries
from .fileio import default_export_name
from .logging import setup_logging
from .paths import coerce_path, format_path
from .session import Session
from .validator import parse_lottie_text, validate_lottie


# ----------------------------
# commands
# ----------------------------

def cmd_validate(args):
    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read file: {e}", file=sys.stderr)
        return 2
    obj, err = parse_lottie_text(text)
    if err:
        print(f"Invalid JSON: {err}")
        return 1
    result = validate_lottie(obj)
    if not result.is_valid:
        print("Validation failed with errors:")
        for e in result.errors:
            print(f"- {e}")
        return 1
    print("OK: valid Lottie document.")
    return 0

def cmd_info(args, session):
    doc = session.doc
    print(f"{doc.get('nm') or Path(args.file).name}: v{doc['v']}, "
          f"{doc['w']}x{doc['h']} @ {doc['fr']} fps")
    layers = layer_summaries(doc)
    print(f"Layers ({len(layers)}):")
    for s in layers:
        print(f"  [{s['index']}] {s['type']:<8} {s['name']}")
    return 0

def cmd_colors(args, session):
    if args.layer is None:
        props = extract_document_colors(session.doc)
    else:
        layers = session.doc["layers"]
        if not 0 <= args.layer < len(layers):
            print(f"No layer {args.layer}.", file=sys.stderr)
            return 1
        props = extract_colors_from_layer(layers[args.layer], ("layers", args.layer))
    for p in props:
        alpha = "" if p.alpha is None else f"  alpha {p.alpha:g}"
        stop = "" if p.stop is None else f"  stop {p.stop}"
        print(f"{p.path}  {p.label}  {p.hex}{alpha}{stop}")
    return 0

def cmd_set_color(args, session):
    target = coerce_path(args.path)
    matches = [p for p in session.colors() if p.steps == target
               and (args.stop is None or p.stop == args.stop)]
    if not matches:
        print(f"No color at {format_path(target)}"
              + ("" if args.stop is None else f" stop {args.stop}"), file=sys.stderr)
        return 1
    if len(matches) > 1:
        print(f"{format_path(target)} is a gradient; pass --stop (0..{len(matches) - 1}).", file=sys.stderr)
        return 1
    if not session.set_color(matches[0], args.hex):
        print(session.state["status_error"], file=sys.stderr)
        return 1
    return _save(args, session)

def cmd_export(args, session):
    return _save(args, session)

def _save(args, session):
    out = Path(args.output) if args.output else Path(args.file).with_name(
        default_export_name(args.file, session.doc))
    path = session.save(out)
    if path is None:
        print(session.state["status_error"], file=sys.stderr)
        return 1
    print(f"Saved {path}")
    return 0


# ----------------------------
# parser
# ----------------------------

def build_parser():
    ap = argparse.ArgumentParser(prog=CLI_NAME, description="Validate and edit Lottie animation JSON")
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="check the minimal Lottie document shape")
    p.add_argument("file")
    p.set_defaults(func=cmd_validate, needs_doc=False)

    p = sub.add_parser("info", help="canvas and layer summary")
    p.add_argument("file")
    p.set_defaults(func=cmd_info, needs_doc=True)

    p = sub.add_parser("colors", help="list fill, stroke and gradient colors")
    p.add_argument("file")
    p.add_argument("--layer", type=int, default=None, help="only this layer index")
    p.set_defaults(func=cmd_colors, needs_doc=True)

    p = sub.add_parser("set-color", help="replace one color by path")
    p.add_argument("file")
    p.add_argument("path", help="e.g. layers.0.shapes.1.c.k")
    p.add_argument("hex", help="#rrggbb")
    p.add_argument("--stop", type=int, default=None, help="gradient stop index")
    p.add_argument("-o", "--output", default=None)
    p.set_defaults(func=cmd_set_color, needs_doc=True)

    p = sub.add_parser("export", help="write compact JSON")
    p.add_argument("file")
    p.add_argument("-o", "--output", default=None)
    p.set_defaults(func=cmd_export, needs_doc=True)

    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper() if args.log_level else None)

    if not args.needs_doc:
        return args.func(args)

    session = Session()
    if not session.load_file(args.file):
        print(f"Could not load {args.file}:", file=sys.stderr)
        for e in session.state["errors"]:
            print(f"- {e}", file=sys.stderr)
        return 1
    return args.func(args, session)


if __name__ == "__main__":
    sys.exit(main())
