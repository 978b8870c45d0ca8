from .converters import (
    TypeConverter,
    WrongType,
    converter,
    bool_converter,
    numeric_converter,
    list_converter,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
    DEFAULT_LIST_CONVERTER,
)
