#!/usr/bin/env python3
"""
richtag - Inline tag markup to styled text trees

Command line front end for the richtag parser, packaged as a ChRIS plugin:
every markup file found in an input directory is processed and the result
written to the matching path in an output directory.

Modes:
    parse      Parse markup into a styled node tree (JSON or YAML)
    strip      Remove every tag, keeping literal text
    escape     Escape every tag so it displays literally
    highlight  Render the markup source as syntax-highlighted HTML

Usage:
    richtag inputdir/ outputdir/ [--inputFile NAME] [--mode MODE]

Examples:
    # Parse all *.txt files into JSON trees
    richtag messages/ out/

    # One file, YAML output, with placeholders
    richtag messages/ out/ --inputFile motd.txt --outputFormat yaml \\
        --placeholder player=Ann --placeholder server=lobby

    # Strip formatting from every .msg file, verbosely
    richtag messages/ out/ --pattern '**/*.msg' --mode strip -vv
"""

import sys
import json
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

import yaml
from chris_plugin import chris_plugin

from .config import appsettings
from .lib import (
    __version__,
    LOG,
    MarkupError,
    parse,
    state_connectToLogger,
    tokens_escape,
    tokens_strip,
)
from .lib.lexer import markup_highlight
from .models import ProgramState, TextNode, pipeline


MODES = ("parse", "strip", "escape", "highlight")

# Define CLI arguments
parser = ArgumentParser(
    description="richtag - parse inline tag markup into styled text trees",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile",
    default=None,
    type=str,
    help="Single markup file (relative to inputdir). Defaults to all files matching --pattern",
)

parser.add_argument(
    "--pattern",
    default=appsettings.input_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting markup files",
)

parser.add_argument(
    "--mode",
    default="parse",
    choices=MODES,
    help="What to do with each markup file",
)

parser.add_argument(
    "--outputFormat",
    default=appsettings.output_format,
    choices=("json", "yaml"),
    help="Tree serialization in parse mode",
)

parser.add_argument(
    "--placeholder",
    action="append",
    default=None,
    type=str,
    help="NAME=VALUE substituted for <NAME> before parsing (repeatable)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve the markup files to process.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputFiles: Markup files to process, sorted
            - envOK: True if environment is valid

    Exits:
        1 if the input file is missing or no files match the pattern
    """

    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if state.inputFile:
        input_file = state.inputdir / state.inputFile
        if not input_file.is_file():
            print(f"Error: Input file not found: {input_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.inputFiles = [input_file]
    else:
        state.inputFiles = sorted(p for p in state.inputdir.glob(state.pattern) if p.is_file())
        if not state.inputFiles:
            print(
                f"Error: No files matching '{state.pattern}' in {state.inputdir}",
                file=sys.stderr,
            )
            state.envOK = False
            sys.exit(1)

    LOG(f"Found {len(state.inputFiles)} markup file(s)", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def sources_read(inputstate: ProgramState) -> ProgramState:
    """
    Read every markup file into memory.

    Returns:
        ProgramState with added field:
            - sources: Markup text keyed by input path

    Exits:
        1 if a file cannot be read
    """

    state = inputstate.copy()
    state.sources = {}

    LOG("Reading markup files...", level=1)

    for input_file in state.inputFiles:
        try:
            state.sources[input_file] = input_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading input file {input_file}: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Read {len(state.sources[input_file])} characters from {input_file.name}", level=2)

    return state


def tree_serialize(node: TextNode, output_format: str) -> str:
    """
    Serialize a parsed tree as JSON or YAML text.

    Args:
        node: Root of the parsed tree
        output_format: "json" or "yaml"

    Returns:
        Serialized tree, newline terminated
    """
    data = node.dict_export()
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=appsettings.json_indent, ensure_ascii=False) + "\n"


def markup_process(inputstate: ProgramState) -> ProgramState:
    """
    Apply the selected mode to every markup source.

    Returns:
        ProgramState with added field:
            - outputs: Output text keyed by input path

    Exits:
        1 on malformed markup or a malformed --placeholder option
    """

    state = inputstate.copy()
    state.outputs = {}

    LOG(f"Processing markup (mode: {state.mode})...", level=1)

    try:
        placeholders = state.placeholders_get()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for input_file, source in state.sources.items():
        try:
            if state.mode == "parse":
                tree = parse(source, mapping=placeholders)
                output = tree_serialize(tree, state.outputFormat)
            elif state.mode == "strip":
                output = tokens_strip(source)
            elif state.mode == "escape":
                output = tokens_escape(source)
            else:
                output = markup_highlight(
                    source, style=appsettings.highlight_style, title=input_file.name
                )
        except MarkupError as e:
            print(f"Markup error in {input_file}:\n{e}", file=sys.stderr)
            sys.exit(1)

        state.outputs[input_file] = output
        LOG(f"Processed {input_file.name}", level=2)

    return state


def outputPath_resolve(state: ProgramState, input_file: Path) -> Path:
    """
    Map an input file to its output path under outputdir.

    The relative layout below inputdir is preserved. Parse mode swaps the
    suffix for the output format; highlight mode writes .html.
    """
    relative = input_file.relative_to(state.inputdir)
    if state.mode == "parse":
        relative = relative.with_suffix(f".{state.outputFormat}")
    elif state.mode == "highlight":
        relative = relative.with_suffix(".html")
    return state.outputdir / relative


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write every output to disk.

    Returns:
        ProgramState with added field:
            - writeResult: Dict containing:
                - status: bool
                - output_files: list of written paths (str)
                - file_count: int
    """

    state = inputstate.copy()
    written = []

    for input_file, output in state.outputs.items():
        output_file = outputPath_resolve(state, input_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(output, encoding="utf-8")
        written.append(str(output_file))
        LOG(f"Wrote {output_file}", level=3)

    state.writeResult = {
        "status": True,
        "output_files": written,
        "file_count": len(written),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display processing results.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if writeResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.writeResult:
        print("Error: Processing failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Processing successful!", level=1)
    LOG(f"  Mode:  {state.mode}", level=1)
    LOG(f"  Files: {state.writeResult['file_count']}", level=1)
    LOG(f"  Output: {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="richtag - inline tag markup parser",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - process markup files from inputdir into outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths and find markup files
        2. sources_read: Read markup files
        3. markup_process: Parse/strip/escape/highlight each source
        4. results_write: Write outputs under outputdir
        5. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_read, markup_process, results_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
