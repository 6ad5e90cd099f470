# lottieedit
# Lottie document validation and path-based editing

from .config import APP_VERSION as __version__
from .errors import (
    LottieEditError,
    StructuralValidationError,
    PathResolutionError,
    LottieFileError,
)
from .validator import ValidationResult, validate_lottie, require_valid_lottie, parse_lottie_text
from .paths import (
    parse_path,
    format_path,
    parent_path,
    path_to_str,
    get_at_path,
    set_at_path,
    delete_at_path,
)
from .colors import (
    ColorProperty,
    normalized_to_hex,
    hex_to_normalized,
    extract_colors_from_shape,
    extract_colors_from_layer,
    extract_document_colors,
    update_color_in_layer,
    apply_hex_color,
    apply_alpha,
)
from .fileio import read_lottie_file, write_lottie_file
from .session import Session

__all__ = [
    "__version__",
    "LottieEditError",
    "StructuralValidationError",
    "PathResolutionError",
    "LottieFileError",
    "ValidationResult",
    "validate_lottie",
    "require_valid_lottie",
    "parse_lottie_text",
    "parse_path",
    "format_path",
    "parent_path",
    "path_to_str",
    "get_at_path",
    "set_at_path",
    "delete_at_path",
    "ColorProperty",
    "normalized_to_hex",
    "hex_to_normalized",
    "extract_colors_from_shape",
    "extract_colors_from_layer",
    "extract_document_colors",
    "update_color_in_layer",
    "apply_hex_color",
    "apply_alpha",
    "read_lottie_file",
    "write_lottie_file",
    "Session",
]
