"""Recursive field-by-field copying between dataclass instances."""

from ekit.copier_options import (
    _POINTER,
    _SHALLOW_KINDS,
    _STRUCT,
    KindMismatchError,
    MultiPointerError,
    TypeMismatchError,
    UnsupportedTypeError,
    _is_struct_instance,
    _kind_of,
    _new_struct,
    _pointer_target,
    _struct_fields,
)


def copy_to(src, dst):
    """Copy the public fields of ``src`` into ``dst`` and return ``dst``.

    Fields are matched by name. Values of built-in kinds are assigned
    (a shallow copy) when both sides have the same type; nested dataclasses
    are copied field by field. Both arguments must be dataclass instances.
    """
    if not _is_struct_instance(src):
        raise UnsupportedTypeError(type(src))
    if not _is_struct_instance(dst):
        raise UnsupportedTypeError(type(dst))
    _copy_struct(type(src), src, type(dst), dst)
    return dst


def _copy_struct(src_cls, src_obj, dst_cls, dst_obj):
    src_fields = dict(_struct_fields(src_cls))
    for name, dst_type in _struct_fields(dst_cls):
        if name in src_fields:
            _copy_field(name, src_fields[name], src_obj, dst_type, dst_obj)


def _copy_field(name, src_type, src_obj, dst_type, dst_obj):
    src_kind, dst_kind = _kind_of(src_type), _kind_of(dst_type)
    if src_kind != dst_kind:
        raise KindMismatchError(src_kind, dst_kind, name)
    value = getattr(src_obj, name)
    if src_kind == _POINTER:
        if value is None:
            return
        _copy_data(name, _pointer_target(src_type), value, _pointer_target(dst_type), dst_obj)
        return
    _copy_data(name, src_type, value, dst_type, dst_obj)


def _copy_data(name, src_type, value, dst_type, dst_obj):
    src_kind = _kind_of(src_type)
    if src_kind == _POINTER:
        raise MultiPointerError(name)
    dst_kind = _kind_of(dst_type)
    if src_kind != dst_kind:
        raise KindMismatchError(src_kind, dst_kind, name)
    if src_kind in _SHALLOW_KINDS:
        if src_type != dst_type:
            raise TypeMismatchError(src_type, dst_type, name)
        setattr(dst_obj, name, value)
    elif src_kind == _STRUCT:
        target = getattr(dst_obj, name)
        if target is None:
            target = _new_struct(dst_type)
            setattr(dst_obj, name, target)
        _copy_struct(src_type, value, dst_type, target)