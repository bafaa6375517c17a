"""Enums shared by the dataset schemas."""

from enum import StrEnum


class CoverageStatus(StrEnum):
    """Implementation status of an airline or airport in the coverage manifest."""

    IMPLEMENTED = "implemented"
    PLANNED = "planned"
    NOT_PLANNED = "not_planned"


class AirlineType(StrEnum):
    """Airline category."""

    MAJOR = "major"
    LCC = "lcc"
    REGIONAL = "regional"
    COMMUTER = "commuter"


class AirportType(StrEnum):
    """Airport category."""

    MAJOR = "major"
    REGIONAL = "regional"
    LOCAL = "local"


class Region(StrEnum):
    """Japanese region an airport belongs to."""

    HOKKAIDO = "hokkaido"
    TOHOKU = "tohoku"
    KANTO = "kanto"
    CHUBU = "chubu"
    KANSAI = "kansai"
    CHUGOKU = "chugoku"
    SHIKOKU = "shikoku"
    KYUSHU = "kyushu"
    OKINAWA = "okinawa"
    INTERNATIONAL = "international"


class ResultKind(StrEnum):
    """Severity of a validation result."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CheckCategory(StrEnum):
    """Check that produced a validation result, in execution order."""

    STRUCTURE = "structure"
    SYMMETRY = "symmetry"
    ATTRIBUTION = "attribution"
    COVERAGE = "coverage"
    METADATA = "metadata"
