"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Callable, List, Optional, Type, TypeVar
from dataclasses import dataclass, field

from .spdx import ConversionResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the conversion progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, licenses, force, show
        - env_check: detailsDir, testdataDir, envOK
        - licenses_resolve: licenseFiles, isAll
        - licenses_convert: conversions, exitStatus
        - generate_run: exitStatus (on failure)
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Checkout of the SPDX license-list-data repository
        outputdir: Directory receiving the generated .lre files
        verbosity: Logging verbosity level (1-3)
        licenses: License names, JSON paths, or the single name "all"
        force: Overwrite existing .lre files
        show: Print each generated LRE to stdout
        envOK: Environment validation passed
        detailsDir: Resolved SPDX json/details directory
        testdataDir: Resolved fixture directory
        licenseFiles: JSON files to convert
        isAll: Whether "all" was requested
        conversions: Per-license conversion results
        exitStatus: Process exit status accumulated across stages
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    licenses: List[str] = field(default_factory=lambda: ["all"])
    force: bool = field(default=False)
    show: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    detailsDir: Path = field(default=Path("/"))
    testdataDir: Path = field(default=Path("/"))
    licenseFiles: List[Path] = field(default_factory=list)
    isAll: bool = field(default=False)
    conversions: List[ConversionResult] = field(default_factory=list)
    exitStatus: int = field(default=0)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the conversion pipeline.

        Args:
            options: Parsed CLI arguments (licenses, force, etc.)
            inputdir: SPDX checkout directory
            outputdir: Directory for generated files

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Drop argparse entries that are not state fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            licenses_resolve,
            licenses_convert,
            generate_run,
            results_report
        )

    This is equivalent to:
        results_report(generate_run(licenses_convert(licenses_resolve(env_check(initial_state)))))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
