"""Breaking-change phrase rules.

Plain textual heuristics over the whole diff; false positives are expected.
"""

from smartcommit.rules.models import PatternRule

REMOVE_FUNCTION = PatternRule(
    id="REMOVE_FUNCTION",
    pattern=r"remove.*function",
    description="A function appears to be removed.",
)

DELETE_METHOD = PatternRule(
    id="DELETE_METHOD",
    pattern=r"delete.*method",
    description="A method appears to be deleted.",
)

REMOVE_EXPORT = PatternRule(
    id="REMOVE_EXPORT",
    pattern=r"remove.*export",
    description="A public export appears to be removed.",
)

DELETE_CLASS = PatternRule(
    id="DELETE_CLASS",
    pattern=r"delete.*class",
    description="A class appears to be deleted.",
)

REMOVE_INTERFACE = PatternRule(
    id="REMOVE_INTERFACE",
    pattern=r"remove.*interface",
    description="An interface appears to be removed.",
)

CHANGE_SIGNATURE = PatternRule(
    id="CHANGE_SIGNATURE",
    pattern=r"change.*signature",
    description="A call signature appears to change.",
)

MODIFY_API = PatternRule(
    id="MODIFY_API",
    pattern=r"modify.*api",
    description="A public API appears to be modified.",
)

UPDATE_SCHEMA = PatternRule(
    id="UPDATE_SCHEMA",
    pattern=r"update.*schema",
    description="A schema appears to be updated.",
)

MIGRATION_DROP = PatternRule(
    id="MIGRATION_DROP",
    pattern=r"migration.*drop",
    description="A migration appears to drop data or structure.",
)

ALL_BREAKING_RULES = [
    REMOVE_FUNCTION,
    DELETE_METHOD,
    REMOVE_EXPORT,
    DELETE_CLASS,
    REMOVE_INTERFACE,
    CHANGE_SIGNATURE,
    MODIFY_API,
    UPDATE_SCHEMA,
    MIGRATION_DROP,
]
