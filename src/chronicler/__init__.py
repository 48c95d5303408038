__version__ = "0.1.0"

from chronicler.core.engine import calculate, calculate_distance  # noqa: E402
from chronicler.core.errors import ChroniclerError, ErrorKind  # noqa: E402
from chronicler.core.export import to_csv, to_json  # noqa: E402
from chronicler.core.parser import parse_lists, validate_format  # noqa: E402
from chronicler.core.tengwar import detransliterate, transliterate  # noqa: E402
from chronicler.core.upload import UploadOptions, process_upload  # noqa: E402
from chronicler.models import CalculationMetadata, CalculationResult, DistancePair, ParsedLists  # noqa: E402

__all__ = [
    "CalculationMetadata",
    "CalculationResult",
    "ChroniclerError",
    "DistancePair",
    "ErrorKind",
    "ParsedLists",
    "UploadOptions",
    "__version__",
    "calculate",
    "calculate_distance",
    "detransliterate",
    "parse_lists",
    "process_upload",
    "to_csv",
    "to_json",
    "transliterate",
    "validate_format",
]
