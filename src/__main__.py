#!/usr/bin/env python3
"""
spdx2lre - SPDX license template to LRE converter

Converts SPDX license definitions into license regular expressions (LREs),
the patterns a license-detection engine uses to recognize license texts
despite wording variation.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Each SPDX JSON file is converted into <outputdir>/<id>.lre, where id is the
licenseId field of the file. Deprecated licenses are skipped. The result is
only a good start for an LRE: it still needs manual adjustment over time to
deal with real-world variation.

If <id>.lre already exists it is left alone unless --force is given. IDs
covered by hand-written LREs (BSD, GPL, MIT families, ...) are never
written. For every LRE written, the plain license text is copied into the
testdata fixtures directory together with a scan test.

The input directory must be a checkout of the SPDX license list:

    git clone https://github.com/spdx/license-list-data _spdx

Usage:
    spdx2lre _spdx/ licenses/ --licenses MIT Apache-2.0

Examples:
    # Convert every non-deprecated license
    spdx2lre _spdx/ licenses/

    # Regenerate one license, overwriting the existing LRE
    spdx2lre _spdx/ licenses/ --licenses Zlib -f

    # Show the generated pattern with syntax highlighting
    spdx2lre _spdx/ licenses/ --licenses Zlib --show -vv
"""

import shlex
import subprocess
import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import LOG, state_connectToLogger, __version__
from .lib.lexer import lre_highlight
from .lib.spdx import SpdxError, excludes_load, fixtures_write, licenseFiles_resolve, license_convert
from .models import ConversionStatus, ProgramState, pipeline


DISPLAY_TITLE = r"""
                 _      ____  _
  ___ _ __   __| |_  _|___ \| |_ __ ___
 / __| '_ \ / _` \ \/ / __) | | '__/ _ \
 \__ \ |_) | (_| |>  < / __/| | | |  __/
 |___/ .__/ \__,_/_/\_\_____|_|_|  \___|
     |_|

  SPDX template to license regular expression converter
"""

SPDX_CHECKOUT_HINT = "git clone https://github.com/spdx/license-list-data"

# Define CLI arguments
parser = ArgumentParser(
    description="spdx2lre - convert SPDX license templates to license regular expressions",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--licenses",
    nargs="+",
    default=["all"],
    help="SPDX license IDs or JSON paths (relative to inputdir) to convert; 'all' converts every license",
)

parser.add_argument(
    "-f",
    "--force",
    action="store_true",
    default=False,
    help="Overwrite existing .lre files",
)

parser.add_argument(
    "--show",
    action="store_true",
    default=False,
    help="Print each generated LRE to stdout with syntax highlighting",
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
    Validate environment and resolve all directories.

    Verifies that the input directory holds an SPDX checkout, then creates
    the output directory.

    Returns:
        ProgramState with added fields:
            - detailsDir: SPDX json/details directory
            - testdataDir: fixture directory under the output directory
            - envOK: True if environment is valid

    Exits:
        1 if the SPDX checkout is missing
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    state.detailsDir = appsettings.detailsDir_resolve(state.inputdir)
    if not state.detailsDir.is_dir():
        print(
            f"Error: expected SPDX database in {state.inputdir}; check out with:\n\t{SPDX_CHECKOUT_HINT}",
            file=sys.stderr,
        )
        state.envOK = False
        sys.exit(1)
    LOG(f"SPDX details: {state.detailsDir}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.testdataDir = state.outputdir / appsettings.testdata_dir
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def licenses_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Turn the requested license names into JSON file paths.

    Returns:
        ProgramState with added fields:
            - licenseFiles: JSON files to convert
            - isAll: True if "all" was requested
    """
    state = inputstate.copy()

    state.licenseFiles, state.isAll = licenseFiles_resolve(
        state.licenses, state.inputdir, state.detailsDir
    )
    LOG(f"Resolved {len(state.licenseFiles)} license file(s)", level=1)
    return state


def licenses_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert every resolved license and write fixtures for new LREs.

    Failures of single licenses are reported and recorded in exitStatus;
    the remaining licenses are still converted.

    Returns:
        ProgramState with added fields:
            - conversions: ConversionResult per license file
            - exitStatus: 1 if any license failed

    Exits:
        1 if the exclusion list cannot be loaded
    """
    state = inputstate.copy()

    try:
        excludes = excludes_load(appsettings.exclude_file)
    except SpdxError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"Loaded {len(excludes)} excluded license IDs", level=3)

    state.conversions = []
    for path in state.licenseFiles:
        result = license_convert(
            path, state.outputdir, excludes, force=state.force, is_all=state.isAll
        )
        state.conversions.append(result)

        if result.failed:
            print(f"Error: {result.message}", file=sys.stderr)
            state.exitStatus = 1
            continue

        if result.warning:
            print(f"{path}: warning: {result.warning}", file=sys.stderr)

        if state.show and result.document:
            sys.stdout.write(lre_highlight(result.document))

        if result.status is ConversionStatus.WRITTEN:
            text_file = appsettings.textFile_resolve(state.inputdir, result.license_id)
            try:
                created = fixtures_write(result.license_id, text_file, state.testdataDir)
            except SpdxError as e:
                print(f"Error: {e}", file=sys.stderr)
                state.exitStatus = 1
                continue
            if created:
                LOG(f"Created fixture {created}", level=2)

    return state


def generate_run(inputstate: ProgramState) -> ProgramState:
    """
    Run the configured downstream generate command in the output directory.

    Skipped when SPDX2LRE_GENERATE_COMMAND is empty.

    Exits:
        1 if the command cannot be started or fails
    """
    state = inputstate.copy()

    command = appsettings.generate_command
    if not command:
        return state

    LOG(f"Running {command!r} in {state.outputdir}", level=1)
    try:
        subprocess.run(shlex.split(command), cwd=state.outputdir, check=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        print(f"Error: {command}: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a per-status summary of the conversion run.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()

    counts = {status: 0 for status in ConversionStatus}
    for result in state.conversions:
        counts[result.status] += 1

    LOG("\nConversion summary:", level=1)
    for status, count in counts.items():
        if count:
            LOG(f"  {status.value}: {count}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="spdx2lre - SPDX template to LRE converter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert SPDX license templates to LRE files.

    Orchestrates the full conversion pipeline:
        1. env_check: Validate the SPDX checkout and output directory
        2. licenses_resolve: Map license names to JSON files
        3. licenses_convert: Translate, write LREs and fixtures
        4. generate_run: Run the downstream generate command, if configured
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - licenses: List[str] - license IDs, JSON paths, or "all"
            - force: bool - overwrite existing .lre files
            - show: bool - print generated LREs
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: SPDX license-list-data checkout
        outputdir: Directory where .lre files are written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    final = pipeline(state, env_check, licenses_resolve, licenses_convert, generate_run, results_report)
    if final.exitStatus:
        sys.exit(final.exitStatus)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
