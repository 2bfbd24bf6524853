"""Copying between dataclass types through a precomputed field tree."""

from dataclasses import dataclass, field
from datetime import date, datetime

from ekit.copier_options import (
    _POINTER,
    _SHALLOW_KINDS,
    _STRUCT,
    CopyOptions,
    KindMismatchError,
    MultiPointerError,
    TypeMismatchError,
    UnsupportedTypeError,
    _kind_of,
    _matches,
    _new_struct,
    _pointer_target,
    _struct_fields,
    _underlying,
    _zero_value,
)
from ekit.option import apply

_DEFAULT_ATOMIC_TYPES = (datetime, date)


@dataclass
class _FieldNode:
    """One matched field; leaves are assigned, inner nodes are descended into."""

    name: str
    src_type: object = None
    dst_type: object = None
    src_target: object = None
    dst_target: object = None
    src_pointer: bool = False
    dst_pointer: bool = False
    is_leaf: bool = False
    children: list = field(default_factory=list)


def _is_zero(value):
    """Return whether ``value`` is the zero value of its kind."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return not value
    if isinstance(value, tuple):
        return all(_is_zero(item) for item in value)
    return False


def _split_pointer(name, annotation):
    """Return ``(is_pointer, target)`` for a field annotation."""
    if _kind_of(annotation) != _POINTER:
        return False, annotation
    target = _pointer_target(annotation)
    if _kind_of(target) == _POINTER:
        raise MultiPointerError(name)
    return True, target


class ReflectCopier:
    """Shallow copier from one dataclass type to another.

    Fields are matched by name. Fields of built-in kinds and atomic types
    (dates and datetimes) are assigned when their types agree; nested
    dataclasses are copied field by field; other fields are skipped.
    Options passed here become defaults for every copy.
    """

    def __init__(self, src_type, dst_type, *options):
        if _kind_of(src_type) != _STRUCT:
            raise UnsupportedTypeError(src_type)
        if _kind_of(dst_type) != _STRUCT:
            raise UnsupportedTypeError(dst_type)
        self._src_type = _underlying(src_type)
        self._dst_type = _underlying(dst_type)
        self._atomic_types = _DEFAULT_ATOMIC_TYPES
        root = _FieldNode(name="")
        self._build(root, self._src_type, self._dst_type)
        self._root = root
        self._defaults = apply(CopyOptions(), *options)

    def _is_atomic(self, annotation):
        return _underlying(annotation) in self._atomic_types

    def _build(self, node, src_cls, dst_cls):
        src_fields = dict(_struct_fields(src_cls))
        for name, dst_type in _struct_fields(dst_cls):
            if name not in src_fields:
                continue
            src_type = src_fields[name]
            src_pointer, src_target = _split_pointer(name, src_type)
            dst_pointer, dst_target = _split_pointer(name, dst_type)
            child = _FieldNode(
                name=name,
                src_type=src_type,
                dst_type=dst_type,
                src_target=src_target,
                dst_target=dst_target,
                src_pointer=src_pointer,
                dst_pointer=dst_pointer,
            )
            src_kind = _kind_of(src_target)
            if src_kind in _SHALLOW_KINDS or self._is_atomic(src_target):
                child.is_leaf = True
            elif src_kind == _STRUCT:
                dst_kind = _kind_of(dst_target)
                if dst_kind != _STRUCT:
                    raise KindMismatchError(src_kind, dst_kind, name)
                self._build(child, src_target, dst_target)
            else:
                continue
            node.children.append(child)

    def copy(self, src, *options):
        """Create a new destination instance filled from ``src``."""
        dst = _new_struct(self._dst_type)
        return self.copy_to(src, dst, *options)

    def copy_to(self, src, dst, *options):
        """Copy ``src`` into ``dst`` and return ``dst``.

        Options given here add to, or replace by field name, the defaults
        given at construction, for this call only.
        """
        if src is not None and not isinstance(src, self._src_type):
            raise TypeError(
                f"ekit: 源对象类型 {type(src).__qualname__} 不是 {self._src_type.__qualname__}"
            )
        if not isinstance(dst, self._dst_type):
            raise TypeError(
                f"ekit: 目标对象类型 {type(dst).__qualname__} 不是 {self._dst_type.__qualname__}"
            )
        if src is None:
            return dst
        opts = apply(self._defaults.clone(), *options)
        self._copy_children(self._root, src, dst, opts)
        return dst

    def _copy_children(self, node, src_obj, dst_obj, opts):
        for child in node.children:
            if opts.in_ignore_fields(child.name):
                continue
            self._copy_field(child, src_obj, dst_obj, opts)

    def _copy_field(self, node, src_obj, dst_obj, opts):
        value = getattr(src_obj, node.name)
        if node.src_pointer and value is None:
            return
        current = getattr(dst_obj, node.name)
        if node.dst_pointer and current is None:
            current = _zero_value(node.dst_target)
            setattr(dst_obj, node.name, current)

        if node.is_leaf:
            self._copy_leaf(node, value, dst_obj, opts)
            return

        if value is None:
            return
        if current is None:
            current = _new_struct(node.dst_target)
            setattr(dst_obj, node.name, current)
        self._copy_children(node, value, current, opts)

    @staticmethod
    def _copy_leaf(node, value, dst_obj, opts):
        convert = opts.converters.get(node.name)
        if convert is None:
            if node.src_target != node.dst_target:
                raise TypeMismatchError(node.src_target, node.dst_target, node.name)
            if _is_zero(value):
                return
            setattr(dst_obj, node.name, value)
            return
        result = convert(value)
        if not _matches(result, node.dst_type):
            raise TypeMismatchError(type(result), node.dst_type, node.name)
        setattr(dst_obj, node.name, result)