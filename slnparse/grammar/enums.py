"""Grammar-level parsers for the closed enum tokens."""

from __future__ import annotations

import re

from slnparse.config import (
    BuildConfigurationKind,
    PlatformKind,
    PreOrPostProject,
    PreOrPostSolution,
    _LiteralEnum,
)
from slnparse.grammar.primitives import literal_ci
from slnparse.grammar.result import Failure, Success, fail_enum

_TOKEN_RE = re.compile(r"[^|.=\s]*")


def _parse_prefix(text: str, pos: int, enum_cls: type[_LiteralEnum]) -> Success | Failure:
    # Members are tried in declaration order; the first literal that prefixes the input wins
    for member in enum_cls:
        result = literal_ci(text, pos, member.value)
        if result.ok:
            return Success(member, result.position)
    token = _TOKEN_RE.match(text, pos).group(0)
    return fail_enum(text, pos, token, enum_cls.__name__)


def parse_build_configuration(text: str, pos: int) -> Success[BuildConfigurationKind] | Failure:
    return _parse_prefix(text, pos, BuildConfigurationKind)


def parse_pre_or_post_project(text: str, pos: int) -> Success[PreOrPostProject] | Failure:
    return _parse_prefix(text, pos, PreOrPostProject)


def parse_pre_or_post_solution(text: str, pos: int) -> Success[PreOrPostSolution] | Failure:
    return _parse_prefix(text, pos, PreOrPostSolution)


def parse_platform(text: str, pos: int, raw: str) -> Success[PlatformKind] | Failure:
    """Convert an already-captured platform token found at ``pos``.

    The whole token must be one of the platform literals, exactly as
    PlatformKind.parse accepts them; surrounding blanks are not trimmed.
    """
    platform = PlatformKind.try_parse(raw)
    if platform is None:
        return fail_enum(text, pos, raw, PlatformKind.__name__)
    return Success(platform, pos + len(raw))
