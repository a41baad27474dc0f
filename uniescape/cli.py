"""uniescape CLI: encode, decode and inspect Unicode escape notations from the terminal.

Usage::

    uniescape info                                  # summary stats
    uniescape list plugins                          # list all plugins
    uniescape list transformers --plugin sanitize   # filter by plugin
    uniescape list notations                        # supported notations

    uniescape show plugin codepoint                 # detailed plugin info

    uniescape encode named "café & crème"           # -> caf&eacute; &amp; cr&egrave;me
    uniescape encode code_point "AB" --separate     # -> U+0041 U+0042
    uniescape decode javascript 'caf\\u00E9'
    uniescape scan hex "&#x41;&#xD800;" --json      # list tokens found
    uniescape guid --format braces                  # {xxxxxxxx-xxxx-4xxx-...}

    uniescape transform trim_lines "  padded  "      # apply a transformer
    echo "caf&eacute;" | uniescape decode named     # pipe input
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional


def _get_registry():
    """Get the shared plugin registry (lazy import to keep CLI startup fast)."""
    from .registry import get_shared_registry
    return get_shared_registry()


def _iter_plugins():
    """Yield (name, plugin_instance) for every built-in plugin."""
    from .plugins import BUILTIN_PLUGINS
    for name in sorted(BUILTIN_PLUGINS):
        cls = BUILTIN_PLUGINS[name]
        yield name, cls()


def _read_input(value: Optional[str]) -> str:
    """Return the positional TEXT, falling back to stdin."""
    if value is not None:
        return value
    if not sys.stdin.isatty():
        return sys.stdin.read().rstrip("\n")
    print("No input provided. Pass as argument or pipe via stdin.", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


def cmd_info(args):
    """Print a high-level summary of plugins, transformers and notations."""
    from .codec import NOTATIONS, get_entity_table

    total_plugins = 0
    total_transformers = 0
    groups = set()

    for name, inst in _iter_plugins():
        total_plugins += 1
        total_transformers += len(inst.transformers)
        if inst.manifest.group:
            groups.add(inst.manifest.group)

    table = get_entity_table()
    print(f"  Plugins:       {total_plugins}")
    print(f"  Transformers:  {total_transformers}")
    print(f"  Notations:     {len(NOTATIONS)}")
    print(f"  Entity names:  {len(table.code_points)} ({len(table)} canonical)")
    print()
    print(f"  Groups: {', '.join(sorted(groups))}")


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


def cmd_list(args):
    """List plugins, transformers, or notations."""
    what = args.what

    if what == "plugins":
        _list_plugins(args)
    elif what == "transformers":
        _list_transformers(args)
    elif what == "notations":
        _list_notations(args)
    else:
        print(f"Unknown list target: {what}", file=sys.stderr)
        print("Choose from: plugins, transformers, notations", file=sys.stderr)
        sys.exit(1)


def _list_plugins(args):
    rows = []
    for name, inst in _iter_plugins():
        m = inst.manifest
        rows.append((name, m.display_name or name, len(inst.transformers), m.group or "-"))

    if getattr(args, "json", False):
        print(json.dumps([{"name": r[0], "display_name": r[1], "transformers": r[2], "group": r[3]} for r in rows], indent=2))
        return

    hdr = f"  {'Name':<14} {'Display Name':<16} {'T':>3}  {'Group'}"
    print(hdr)
    print("  " + "-" * (len(hdr) - 2))
    for name, display, t, grp in rows:
        print(f"  {name:<14} {display:<16} {t:>3}  {grp}")
    print()
    print(f"  {len(rows)} plugins")


def _list_transformers(args):
    plugin_filter = getattr(args, "plugin", None)

    rows = []
    for pname, inst in _iter_plugins():
        if plugin_filter and pname != plugin_filter:
            continue
        for tname in sorted(inst.transformers):
            rows.append((tname, pname, inst.manifest.group or "-"))

    if getattr(args, "json", False):
        print(json.dumps([{"name": r[0], "plugin": r[1], "group": r[2]} for r in rows], indent=2))
        return

    hdr = f"  {'Transformer':<26} {'Plugin':<12} {'Group'}"
    print(hdr)
    print("  " + "-" * (len(hdr) - 2))
    for tname, pname, grp in rows:
        print(f"  {tname:<26} {pname:<12} {grp}")
    print()
    print(f"  {len(rows)} transformers")


def _list_notations(args):
    from .codec import NOTATIONS

    if getattr(args, "json", False):
        print(json.dumps([
            {"key": n.key, "title": n.title, "example": n.example, "separable": n.separable}
            for n in NOTATIONS.values()
        ], indent=2))
        return

    hdr = f"  {'Notation':<16} {'Example':<12} {'Title'}"
    print(hdr)
    print("  " + "-" * (len(hdr) - 2))
    for n in NOTATIONS.values():
        print(f"  {n.key:<16} {n.example:<12} {n.title}")
    print()
    print(f"  {len(NOTATIONS)} notations")


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


def cmd_show(args):
    """Show detailed info about a plugin."""
    from .plugins import BUILTIN_PLUGINS

    name = args.name
    if name not in BUILTIN_PLUGINS:
        print(f"Plugin not found: {name}", file=sys.stderr)
        print(f"Available: {', '.join(sorted(BUILTIN_PLUGINS))}", file=sys.stderr)
        sys.exit(1)

    inst = BUILTIN_PLUGINS[name]()
    m = inst.manifest

    print(f"  Plugin: {m.display_name or name}")
    print(f"  Name:   {name}")
    print(f"  Group:  {m.group or '-'}")
    print(f"  Desc:   {m.description or '-'}")
    if m.notations:
        print(f"  Notations: {', '.join(m.notations)}")
    print()

    transformers = sorted(inst.transformers)
    if transformers:
        print(f"  Transformers ({len(transformers)}):")
        for t in transformers:
            print(f"    - {t}")
        print()


# ---------------------------------------------------------------------------
# encode / decode / scan
# ---------------------------------------------------------------------------


def cmd_encode(args):
    """Encode TEXT into a notation."""
    from .codec import encode

    text = _read_input(args.input)
    print(encode(text, args.notation, double_encode=args.double_encode, separate=args.separate))


def cmd_decode(args):
    """Decode every escape of a notation in TEXT."""
    from .codec import decode

    text = _read_input(args.input)
    print(decode(text, args.notation))


def cmd_scan(args):
    """List the escape tokens of a notation found in TEXT."""
    from .codec import iter_tokens

    text = _read_input(args.input)
    tokens = list(iter_tokens(text, args.notation))

    if getattr(args, "json", False):
        print(json.dumps([
            {
                "start": t.start,
                "end": t.end,
                "text": t.text,
                "value": t.value,
                "name": t.name,
                "valid": t.is_valid,
                "decoded": t.decoded,
            }
            for t in tokens
        ], indent=2, ensure_ascii=False))
        return

    for t in tokens:
        value = f"U+{t.value:04X}" if t.value is not None else "-"
        status = "ok" if t.is_valid else "invalid"
        print(f"  {t.start:>5}-{t.end:<5} {t.text:<16} {value:<10} {status}")
    print()
    print(f"  {len(tokens)} tokens")


def cmd_guid(args):
    """Print one or more new GUIDs."""
    from .plugins.encoding import generate_guid

    for _ in range(args.count):
        print(generate_guid(args.format))


# ---------------------------------------------------------------------------
# transform
# ---------------------------------------------------------------------------


def _coerce_value(value: Any) -> Any:
    """Turn ``"true"``/``"false"`` style strings into booleans."""
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no"):
            return False
    return value


def _parse_extra_args(extra: List[str]) -> Dict[str, Any]:
    """Parse ['--key', 'value', '--flag', ...] into a dict."""
    kwargs = {}
    i = 0
    while i < len(extra):
        arg = extra[i]
        if arg.startswith("--"):
            key = arg[2:].replace("-", "_")
            # Check if next arg is a value or another flag
            if i + 1 < len(extra) and not extra[i + 1].startswith("--"):
                kwargs[key] = _coerce_value(extra[i + 1])
                i += 2
            else:
                kwargs[key] = True
                i += 1
        else:
            i += 1
    return kwargs


def cmd_transform(args):
    """Apply a transformer to input text."""
    transformer_name = args.transformer_name
    registry = _get_registry()

    factory = registry.get_transformer(transformer_name)
    if factory is None:
        print(f"Transformer not found: {transformer_name}", file=sys.stderr)
        all_t = list(registry.transformers.keys())
        matches = [t for t in all_t if transformer_name.lower() in t.lower()]
        if matches:
            print(f"Did you mean: {', '.join(matches[:5])}", file=sys.stderr)
        sys.exit(1)

    input_text = _read_input(args.input)

    params = _parse_extra_args(args.extra) if args.extra else {}
    transformer = factory(params)

    result = transformer.transform(input_text)
    if result.success:
        print(result.value)
    else:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    from .codec import NOTATIONS
    from .plugins.encoding import GUID_FORMATS

    notation_keys = list(NOTATIONS)

    parser = argparse.ArgumentParser(
        prog="uniescape",
        description="uniescape - Unicode escape notation toolkit",
    )
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command")

    # --- info ---
    sub.add_parser("info", help="Show summary stats")

    # --- list ---
    p_list = sub.add_parser("list", help="List plugins, transformers, or notations")
    p_list.add_argument("what", choices=["plugins", "transformers", "notations"])
    p_list.add_argument("--plugin", help="Filter transformers by plugin name")
    p_list.add_argument("--json", action="store_true", help="Output as JSON")

    # --- show ---
    p_show = sub.add_parser("show", help="Show detailed info about a plugin")
    p_show.add_argument("what", choices=["plugin"])
    p_show.add_argument("name", help="Name of the plugin")

    # --- encode ---
    p_encode = sub.add_parser("encode", help="Encode text into a notation")
    p_encode.add_argument("notation", choices=notation_keys)
    p_encode.add_argument("input", nargs="?", default=None, help="Input text (or pipe via stdin)")
    p_encode.add_argument("--double-encode", action="store_true", help="Also escape existing escapes")
    p_encode.add_argument("--separate", action="store_true", help="Space-separate U+ and 0x tokens")

    # --- decode ---
    p_decode = sub.add_parser("decode", help="Decode the escapes of a notation")
    p_decode.add_argument("notation", choices=notation_keys)
    p_decode.add_argument("input", nargs="?", default=None, help="Input text (or pipe via stdin)")

    # --- scan ---
    p_scan = sub.add_parser("scan", help="List the escapes of a notation found in the input")
    p_scan.add_argument("notation", choices=notation_keys)
    p_scan.add_argument("input", nargs="?", default=None, help="Input text (or pipe via stdin)")
    p_scan.add_argument("--json", action="store_true", help="Output as JSON")

    # --- guid ---
    p_guid = sub.add_parser("guid", help="Generate random GUIDs")
    p_guid.add_argument("--format", choices=list(GUID_FORMATS), default="plain", help="Wrapper around the GUID")
    p_guid.add_argument("-n", "--count", type=int, default=1, help="How many to print")

    # --- transform ---
    p_transform = sub.add_parser("transform", help="Apply a transformer to input")
    p_transform.add_argument("transformer_name", help="Name of the transformer")
    p_transform.add_argument("input", nargs="?", default=None, help="Input value (or pipe via stdin)")
    p_transform.add_argument("extra", nargs=argparse.REMAINDER, help="Transformer params as --key value")

    return parser


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.version:
        from . import __version__
        print(f"uniescape {__version__}")
        return

    if args.command is None:
        parser.print_help()
        return

    commands = {
        "info": cmd_info,
        "list": cmd_list,
        "show": cmd_show,
        "encode": cmd_encode,
        "decode": cmd_decode,
        "scan": cmd_scan,
        "guid": cmd_guid,
        "transform": cmd_transform,
    }

    handler = commands.get(args.command)
    if handler:
        handler(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
