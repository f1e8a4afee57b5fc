from global_styles.annotations.model import AnnotatedClass, is_valid_class_name
from global_styles.annotations.parser import (
    ANNOTATED_CLASSES,
    HINT_PATTERN,
    HINTS,
    AnnotationGrammar,
    parse_annotated_classes,
    parse_annotations,
    parse_hints,
)

__all__ = [
    "ANNOTATED_CLASSES",
    "AnnotatedClass",
    "AnnotationGrammar",
    "HINTS",
    "HINT_PATTERN",
    "is_valid_class_name",
    "parse_annotated_classes",
    "parse_annotations",
    "parse_hints",
]
