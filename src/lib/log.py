"""
Centralized logging using Loguru with context-aware verbosity.

The parser, engine and CLI all call LOG(); whether anything is emitted
depends on the verbosity of the ProgramState connected to the current
context. Library callers that never connect a state get no output.

The connected state lives in a ContextVar, so parses running in different
threads or tasks never see each other's verbosity.

Usage:
    from richtag.lib.log import LOG, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Processing 3 files", level=1)
    LOG("Parsed tree with 4 children", level=2)
    LOG("Tag 'red' at 12 -> color-open", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar, Token
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with richtag-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <8}</cyan>:<cyan>{function: <16}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> Token:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of each pipeline function to make the state's
    verbosity setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute, or None to
               silence LOG() again

    Returns:
        ContextVar token that can be passed to state_disconnect()
    """
    return _program_state.set(state)


def state_disconnect(token: Token) -> None:
    """Restore the logging context that was active before state_connectToLogger()"""
    _program_state.reset(token)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher), includes every tag disposition
    """
    state = _program_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
