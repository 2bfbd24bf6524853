"""Options and errors for copying data between dataclass instances.

Copying works on the declared field annotations of dataclasses:
``Optional[T]`` is a nullable reference to ``T``, a ``typing.NewType``
is a distinct type with the same kind as its base, and fields whose
names start with an underscore are private and never copied. Field
annotations must be real types, not postponed string annotations.
"""

import dataclasses
import functools
import types
from typing import Any, Union, get_args, get_origin

_POINTER = "pointer"
_STRUCT = "struct"
_INTERFACE = "interface"
_OBJECT = "object"

_BUILTIN_KINDS = {
    bool: "bool",
    int: "int",
    float: "float",
    complex: "complex",
    str: "str",
    bytes: "bytes",
    list: "list",
    tuple: "tuple",
    dict: "dict",
    set: "set",
    frozenset: "set",
}

_SHALLOW_KINDS = frozenset(_BUILTIN_KINDS.values())

_UNION_ORIGINS = (Union, types.UnionType)


def _underlying(tp):
    """Strip ``NewType`` wrappers from an annotation."""
    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return tp


def _kind_of(tp):
    """Return the kind of an annotation, such as ``"int"`` or ``"struct"``."""
    tp = _underlying(tp)
    if tp is Any:
        return _INTERFACE
    origin = get_origin(tp)
    if origin in _UNION_ORIGINS:
        args = get_args(tp)
        if len(args) == 2 and type(None) in args:
            return _POINTER
        return _INTERFACE
    base = origin if origin is not None else tp
    if isinstance(base, type) and dataclasses.is_dataclass(base):
        return _STRUCT
    if base in _BUILTIN_KINDS:
        return _BUILTIN_KINDS[base]
    return _OBJECT


def _pointer_target(tp):
    """Return the referenced annotation of an ``Optional`` annotation."""
    return next(arg for arg in get_args(_underlying(tp)) if arg is not type(None))


def _type_name(tp):
    if get_origin(tp) is not None:
        return repr(tp)
    if hasattr(tp, "__supertype__"):
        return tp.__name__
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


def _is_struct_instance(obj):
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


@functools.lru_cache(maxsize=None)
def _all_field_types(cls):
    return tuple((f.name, f.type, f) for f in dataclasses.fields(cls))


@functools.lru_cache(maxsize=None)
def _struct_fields(cls):
    """Return ``(name, annotation)`` pairs of the public fields of a dataclass."""
    return tuple(
        (name, tp) for name, tp, _ in _all_field_types(_underlying(cls))
        if not name.startswith("_")
    )


def _zero_value(tp):
    kind = _kind_of(tp)
    if kind == _STRUCT:
        return _new_struct(tp)
    if kind == "tuple":
        args = get_args(_underlying(tp))
        if args and args[-1] is not Ellipsis:
            return tuple(_zero_value(arg) for arg in args)
        return ()
    if kind in _SHALLOW_KINDS:
        base = _underlying(tp)
        return (get_origin(base) or base)()
    return None


def _new_struct(tp):
    """Create an instance of a dataclass, giving required fields zero values."""
    cls = _underlying(tp)
    cls = get_origin(cls) or cls
    kwargs = {
        name: _zero_value(annotation)
        for name, annotation, f in _all_field_types(cls)
        if f.init
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    }
    return cls(**kwargs)


def _matches(value, tp):
    """Return whether ``value`` is an instance of the annotation ``tp``."""
    if isinstance(tp, tuple):
        return any(_matches(value, item) for item in tp)
    tp = _underlying(tp)
    if tp is Any or tp is object:
        return True
    if tp is None or tp is type(None):
        return value is None
    origin = get_origin(tp)
    if origin in _UNION_ORIGINS:
        return any(_matches(value, arg) for arg in get_args(tp))
    if origin is not None:
        return isinstance(value, origin)
    return isinstance(value, tp)


class CopierError(TypeError):
    """Base class of errors raised while copying."""


class UnsupportedTypeError(CopierError):
    """The copier was given something that is not a dataclass."""

    def __init__(self, typ):
        self.type = typ
        self.kind = _kind_of(typ)
        super().__init__(
            f"ekit: copier 入口只支持 Struct 不支持类型 {_type_name(typ)}, 种类 {self.kind}"
        )


class KindMismatchError(CopierError):
    """Matching fields have different kinds."""

    def __init__(self, src_kind, dst_kind, field):
        self.src_kind = src_kind
        self.dst_kind = dst_kind
        self.field = field
        super().__init__(f"ekit: 字段 {field} 的 Kind 不匹配, src: {src_kind}, dst: {dst_kind}")


class TypeMismatchError(CopierError):
    """Matching fields have the same kind but different types."""

    def __init__(self, src_type, dst_type, field):
        self.src_type = src_type
        self.dst_type = dst_type
        self.field = field
        super().__init__(
            f"ekit: 字段 {field} 的 Type 不匹配, "
            f"src: {_type_name(src_type)}, dst: {_type_name(dst_type)}"
        )


class MultiPointerError(CopierError):
    """A field is a nullable reference to another nullable reference."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"ekit: 字段 {field} 是多级指针")


class ConvertFieldTypeMismatchError(CopierError):
    """A field converter received a value of the wrong type."""

    def __init__(self, message="ekit: 转化字段类型不匹配"):
        super().__init__(message)


@dataclasses.dataclass
class CopyOptions:
    """Settings applied while copying: ignored field names and converters."""

    ignored: set = dataclasses.field(default_factory=set)
    converters: dict = dataclasses.field(default_factory=dict)

    def in_ignore_fields(self, name):
        """Return whether the field ``name`` is to be skipped."""
        return name in self.ignored

    def clone(self):
        """Return an independent copy of these options."""
        return CopyOptions(set(self.ignored), dict(self.converters))


def ignore_fields(*fields):
    """Return an option that skips the named fields at every level."""

    def option(opts):
        opts.ignored.update(fields)

    return option


def convert_field(field, converter, src_type=object):
    """Return an option that converts the named field with ``converter``.

    The source value must match ``src_type``, otherwise the conversion raises
    ConvertFieldTypeMismatchError. An empty field name or a missing converter
    makes the option do nothing.
    """

    def option(opts):
        if not field or converter is None:
            return
        convert = converter.convert if hasattr(converter, "convert") else converter

        def wrapper(src):
            if not _matches(src, src_type):
                raise ConvertFieldTypeMismatchError()
            return convert(src)

        opts.converters[field] = wrapper

    return option