"""CLI entry point for the Stellar interpreter.

Usage:
    python -m stellar [-v|-vv|-vvv]                 start the REPL
    python -m stellar [-v...] <script>              run a script file
    python -m stellar [-v...] --emit-ast <script>   write <script>.ast.json
    python -m stellar [-v...] --ast <ast_json_file> run an emitted AST

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --version     Print the interpreter version and exit

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .ast_json import program_from_obj, program_to_obj
from .driver import Stellar
from .interpreter import InterpreterMode
from .parser import parse_source
from .shell import StellarShell


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def emit_ast(path: Path) -> None:
    result = parse_source(read_source(path))
    if not result.ok:
        for diagnostic in result.diagnostics:
            print(diagnostic)
        sys.exit(1)
    out_path = path.with_name(path.name + '.ast.json')
    with open(out_path, 'w', encoding='utf-8') as out:
        json.dump(program_to_obj(result.statements), out, ensure_ascii=False, indent=2)
    print(str(out_path))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='stellar', description="Stellar language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--version', action='version', version=f'Stellar {__version__}')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='SCRIPT', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='source file to execute; omit to start the REPL')
    args = parser.parse_args(argv)

    if args.emit_ast:
        emit_ast(Path(args.emit_ast))
        return

    if args.ast:
        text = read_source(Path(args.ast))
        try:
            statements = program_from_obj(json.loads(text))
        except (KeyError, ValueError, RecursionError) as e:
            print(f"Error: invalid AST file {args.ast}: {e}", file=sys.stderr)
            sys.exit(1)
        stellar = Stellar(InterpreterMode.SCRIPT, debug_level=args.v)
        try:
            stellar.execute(statements)
        finally:
            stellar.close()
        return

    if args.script:
        source = read_source(Path(args.script))
        stellar = Stellar(InterpreterMode.SCRIPT, debug_level=args.v)
        try:
            stellar.run(source)
        finally:
            stellar.close()
        return

    stellar = Stellar(InterpreterMode.REPL, debug_level=args.v, color=True)
    try:
        StellarShell(stellar).cmdloop()
    except KeyboardInterrupt:
        print()
    finally:
        stellar.close()


if __name__ == '__main__':
    main()
