"""Promotion request options and their validation.

The CLI collects flags into a `PromoteOptions`. `validate` checks them all
at once and, when they are sound, turns the loose strings into a
`PromoteRequest` whose freight and target are tagged unions, so code past
this point cannot see a "both set" or "neither set" state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from freightctl.core.config import CLIConfig
from freightctl.core.result import Err, Ok, Result
from freightctl.output.printers import SUPPORTED_OUTPUT_FORMATS

__all__ = [
    "FreightByAlias",
    "FreightByName",
    "FreightRef",
    "PromoteOptions",
    "PromoteRequest",
    "Selector",
    "SubscribersOf",
    "ToStage",
    "ValidationError",
    "validate",
]


@dataclass(frozen=True, slots=True)
class FreightByName:
    name: str


@dataclass(frozen=True, slots=True)
class FreightByAlias:
    alias: str


type FreightRef = FreightByName | FreightByAlias


@dataclass(frozen=True, slots=True)
class ToStage:
    stage: str


@dataclass(frozen=True, slots=True)
class SubscribersOf:
    stage: str


type Selector = ToStage | SubscribersOf


@dataclass(frozen=True, slots=True)
class PromoteOptions:
    """Flags for one `promote` invocation, exactly as the user gave them."""

    project: str = ""
    freight_name: str = ""
    freight_alias: str = ""
    stage: str = ""
    subscribers_of: str = ""
    output_format: str | None = None
    config: CLIConfig = field(default_factory=CLIConfig)


@dataclass(frozen=True, slots=True)
class PromoteRequest:
    project: str
    freight: FreightRef
    target: Selector


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Every problem found in a set of options, in check order."""

    errors: tuple[str, ...]

    @property
    def message(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return "\n".join(self.errors)


def _freight_ref(name: str, alias: str) -> Result[FreightRef, str]:
    match (name, alias):
        case ("", ""):
            return Err("either freight name or freight alias is required")
        case (_, ""):
            return Ok(FreightByName(name))
        case ("", _):
            return Ok(FreightByAlias(alias))
        case _:
            return Err("only one of freight name or freight alias may be set")


def _selector(stage: str, subscribers_of: str) -> Result[Selector, str]:
    match (stage, subscribers_of):
        case ("", ""):
            return Err("either target stage or subscribers-of stage is required")
        case (_, ""):
            return Ok(ToStage(stage))
        case ("", _):
            return Ok(SubscribersOf(subscribers_of))
        case _:
            return Err("only one of target stage or subscribers-of stage may be set")


def validate(options: PromoteOptions) -> Result[PromoteRequest, ValidationError]:
    """Check all options and build the typed request.

    Every check runs even when an earlier one fails so the user sees all
    problems in one go. Whitespace-only values count as unset.
    """
    errors: list[str] = []

    project = options.project.strip()
    if not project:
        errors.append("project is required")

    freight = _freight_ref(options.freight_name.strip(), options.freight_alias.strip())
    if isinstance(freight, Err):
        errors.append(freight.error)

    target = _selector(options.stage.strip(), options.subscribers_of.strip())
    if isinstance(target, Err):
        errors.append(target.error)

    output_format = (options.output_format or "").strip()
    if output_format and output_format.lower() not in SUPPORTED_OUTPUT_FORMATS:
        errors.append(
            f'unsupported output format "{output_format}" '
            f"(allowed: {', '.join(SUPPORTED_OUTPUT_FORMATS)})"
        )

    if errors or isinstance(freight, Err) or isinstance(target, Err):
        return Err(ValidationError(tuple(errors)))
    return Ok(PromoteRequest(project=project, freight=freight.value, target=target.value))
