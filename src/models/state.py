"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the processing pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as processing progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, pattern, mode,
                   outputFormat, placeholder
        - env_check: inputFiles, envOK
        - sources_read: sources
        - markup_process: outputs
        - results_write: writeResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing markup source files
        outputdir: Base output directory for processed files
        verbosity: Logging verbosity level (1-3)
        inputFile: Single markup file (relative to inputdir), or None to glob
        pattern: Glob used to find markup files when inputFile is not given
        mode: One of "parse", "strip", "escape", "highlight"
        outputFormat: Tree serialization for parse mode ("json" or "yaml")
        placeholder: NAME=VALUE strings substituted before parsing
        envOK: Environment validation passed
        inputFiles: Resolved markup files to process
        sources: Markup text keyed by input file
        outputs: Rendered output text keyed by input file
        writeResult: Summary of written files (output_files, file_count, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: Optional[str] = field(default=None)
    pattern: str = field(default="**/*.txt")
    mode: str = field(default="parse")
    outputFormat: str = field(default="json")
    placeholder: List[str] = field(default_factory=list)

    # Pipeline state
    envOK: bool = field(default=False)
    inputFiles: List[Path] = field(default_factory=list)
    sources: Dict[Path, str] = field(default_factory=dict)
    outputs: Dict[Path, str] = field(default_factory=dict)
    writeResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the pipeline.

        Args:
            options: Parsed CLI arguments (inputFile, mode, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Unknown options (e.g. those added by the plugin wrapper) are dropped
        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)

    def placeholders_get(self) -> Dict[str, str]:
        """
        Split NAME=VALUE placeholder options into a mapping.

        Returns:
            Dict of placeholder name to replacement value, in option order

        Raises:
            ValueError: If an option has no '=' separator
        """
        placeholders: Dict[str, str] = {}
        for item in self.placeholder:
            name, sep, value = item.partition("=")
            if not sep:
                raise ValueError(f"Placeholder '{item}' must be NAME=VALUE")
            placeholders[name] = value
        return placeholders


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_read,
            markup_process,
            results_write,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
