from dataclasses import dataclass, field
from typing import NewType, Optional

import pytest

from ekit.copier_options import (
    KindMismatchError,
    MultiPointerError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from ekit.pure_copier import copy_to


@dataclass
class BasicSrc:
    name: str = ""
    age: int = 0
    c_number: complex = 0j


@dataclass
class BasicDst(BasicSrc):
    pass


@dataclass
class SimpleSrc:
    name: str = ""
    age: Optional[int] = None
    friends: list[str] = field(default_factory=list)


@dataclass
class SimpleDst(SimpleSrc):
    pass


@dataclass
class EmbedSrc:
    simple_src: SimpleSrc = field(default_factory=SimpleSrc)
    basic_src: Optional[BasicSrc] = None


@dataclass
class EmbedDst(EmbedSrc):
    pass


@dataclass
class ComplexSrc:
    simple: SimpleSrc = field(default_factory=SimpleSrc)
    embed: Optional[EmbedSrc] = None
    basic_src: BasicSrc = field(default_factory=BasicSrc)


@dataclass
class ComplexDst:
    simple: SimpleDst = field(default_factory=SimpleDst)
    embed: Optional[EmbedDst] = None
    basic_src: BasicSrc = field(default_factory=BasicSrc)


@dataclass
class SpecialSrc:
    arr: tuple[float, float, float] = (0.0, 0.0, 0.0)
    m: dict[str, int] = field(default_factory=dict)


@dataclass
class SpecialDst(SpecialSrc):
    pass


@dataclass
class InnerStr:
    a: str = ""


@dataclass
class InnerInt:
    a: int = 0


@dataclass
class NotMatchSrc(ComplexSrc):
    s: InnerStr = field(default_factory=InnerStr)


@dataclass
class NotMatchDst(ComplexDst):
    s: InnerInt = field(default_factory=InnerInt)


IntPtr = NewType("IntPtr", Optional[int])


@dataclass
class MultiPtrSrc:
    name: str = ""
    age: Optional[IntPtr] = None
    friends: list[str] = field(default_factory=list)


@dataclass
class MultiPtrDst(MultiPtrSrc):
    pass


@dataclass
class DiffSrc:
    a: str = ""
    b: int = 0
    _c: SimpleSrc = field(default_factory=SimpleSrc)
    f: BasicSrc = field(default_factory=BasicSrc)


@dataclass
class DiffDst:
    a: str = ""
    b: int = 0
    _d: SimpleSrc = field(default_factory=SimpleSrc)
    g: BasicSrc = field(default_factory=BasicSrc)


@dataclass
class SimpleEmbedDst:
    simple_src: SimpleSrc = field(default_factory=SimpleSrc)


@dataclass
class ArraySrc:
    a: list[SimpleSrc] = field(default_factory=list)


@dataclass
class ArrayDst(ArraySrc):
    pass


@dataclass
class ArrayDst1:
    a: list[SimpleDst] = field(default_factory=list)


@dataclass
class MapSrc:
    a: dict[str, SimpleSrc] = field(default_factory=dict)


@dataclass
class MapDst(MapSrc):
    pass


@dataclass
class MapDst1:
    a: dict[str, SimpleDst] = field(default_factory=dict)


AliasInt = NewType("AliasInt", int)
AliasInt1 = int


@dataclass
class SpecialSrc1:
    a: int = 0


@dataclass
class SpecialDst1:
    a: AliasInt = AliasInt(0)


@dataclass
class SpecialDst2:
    a: AliasInt1 = 0


@dataclass
class NoDefaults:
    name: str
    inner: BasicSrc


@dataclass
class HolderSrc:
    inner: Optional[BasicSrc] = None


@dataclass
class HolderDst:
    inner: Optional[NoDefaults] = None


@dataclass
class PtrAgeDst:
    name: str = ""
    age: int = 0
    friends: list[str] = field(default_factory=list)


def person(cls=SimpleSrc):
    return cls(name="大明", age=18, friends=["Tom", "Jerry"])


def people():
    return [person(), SimpleSrc(name="小明", age=8, friends=["Tom"])]


def complex_parts(simple_cls=SimpleSrc, embed_cls=EmbedSrc):
    simple = simple_cls(name="xiaohong", age=18, friends=["ha", "ha", "le"])
    embed = embed_cls(
        simple_src=SimpleSrc(name="xiaopeng", age=88, friends=["la", "ha", "le"]),
        basic_src=BasicSrc(name="wang", age=22, c_number=complex(2, 1)),
    )
    basic = BasicSrc(name="wang11", age=22, c_number=complex(2, 1))
    return {"simple": simple, "embed": embed, "basic_src": basic}


def diff_src():
    return DiffSrc(
        a="xiaowang",
        b=100,
        _c=SimpleSrc(name="66", age=100),
        f=BasicSrc(name="good name", age=200, c_number=complex(2, 2)),
    )


def diff_dst(a, b):
    return DiffDst(
        a=a,
        b=b,
        _d=SimpleSrc(name="wodemingzi", age=10),
        g=BasicSrc(name="nidemingzi", age=23, c_number=complex(1, 2)),
    )


def embed(cls):
    return cls(
        simple_src=SimpleSrc(name="xiaoli", age=19, friends=[]),
        basic_src=BasicSrc(name="xiaowang", age=20, c_number=complex(2, 2)),
    )


@pytest.mark.parametrize(
    "src, dst, expected",
    [
        pytest.param(person(), SimpleDst(), person(SimpleDst), id="simple"),
        pytest.param(
            BasicSrc(name="大明", age=10, c_number=complex(1, 2)),
            BasicDst(),
            BasicDst(name="大明", age=10, c_number=complex(1, 2)),
            id="basic",
        ),
        pytest.param(SimpleSrc(name="大明"), SimpleDst(), SimpleDst(name="大明"), id="empty"),
        pytest.param(embed(EmbedSrc), EmbedDst(), embed(EmbedDst), id="embedded"),
        pytest.param(
            ComplexSrc(**complex_parts()),
            ComplexDst(),
            ComplexDst(**complex_parts(SimpleDst, EmbedDst)),
            id="complex",
        ),
        pytest.param(
            SpecialSrc(arr=(1.0, 2.0, 3.0), m={"ha": 1, "o": 2}),
            SpecialDst(),
            SpecialDst(arr=(1.0, 2.0, 3.0), m={"ha": 1, "o": 2}),
            id="special",
        ),
        pytest.param(MultiPtrSrc(name="a"), MultiPtrDst(), MultiPtrDst(name="a"), id="multi-none"),
        pytest.param(
            diff_src(),
            DiffDst(),
            DiffDst(a="xiaowang", b=100, _d=SimpleSrc(), g=BasicSrc()),
            id="src-extra",
        ),
        pytest.param(diff_src(), diff_dst("66", 1), diff_dst("xiaowang", 100), id="dst-extra"),
        pytest.param(SimpleSrc(name="haha"), SimpleEmbedDst(), SimpleEmbedDst(), id="cross-level"),
        pytest.param(ArraySrc(a=people()), ArrayDst(), ArrayDst(a=people()), id="list"),
        pytest.param(MapSrc(a={"a": person()}), MapDst(), MapDst(a={"a": person()}), id="dict"),
        pytest.param(SpecialSrc1(a=1), SpecialDst2(), SpecialDst2(a=1), id="alias"),
        pytest.param(
            HolderSrc(inner=BasicSrc(name="wang", age=22)),
            HolderDst(),
            HolderDst(inner=NoDefaults(name="wang", inner=BasicSrc())),
            id="new-reference",
        ),
    ],
)
def test_copy(src, dst, expected):
    assert copy_to(src, dst) == expected


@pytest.mark.parametrize(
    "src, dst, error, attrs",
    [
        pytest.param(10, SimpleDst(), UnsupportedTypeError, {"type": int}, id="src-int"),
        pytest.param(person(), "", UnsupportedTypeError, {"type": str}, id="dst-str"),
        pytest.param(object(), SimpleDst(), UnsupportedTypeError, {"type": object}, id="object"),
        pytest.param(SimpleSrc, SimpleDst(), UnsupportedTypeError, {}, id="class"),
        pytest.param(
            NotMatchSrc(**complex_parts(), s=InnerStr(a="a")),
            NotMatchDst(),
            KindMismatchError,
            {"src_kind": "str", "dst_kind": "int", "field": "a"},
            id="not-match",
        ),
        pytest.param(
            MultiPtrSrc(name="a", age=IntPtr(10)),
            MultiPtrDst(),
            MultiPointerError,
            {"field": "age"},
            id="multi-pointer",
        ),
        pytest.param(
            ArraySrc(a=people()),
            ArrayDst1(),
            TypeMismatchError,
            {"src_type": list[SimpleSrc], "dst_type": list[SimpleDst], "field": "a"},
            id="list-differs",
        ),
        pytest.param(
            MapSrc(a={"a": person()}),
            MapDst1(),
            TypeMismatchError,
            {"src_type": dict[str, SimpleSrc], "dst_type": dict[str, SimpleDst], "field": "a"},
            id="dict-differs",
        ),
        pytest.param(
            SpecialSrc1(a=1),
            SpecialDst1(),
            TypeMismatchError,
            {"src_type": int, "dst_type": AliasInt, "field": "a"},
            id="named-type",
        ),
        pytest.param(
            SimpleSrc(name="大明", age=18),
            PtrAgeDst(),
            KindMismatchError,
            {"src_kind": "pointer", "dst_kind": "int", "field": "age"},
            id="reference-vs-value",
        ),
    ],
)
def test_copy_errors(src, dst, error, attrs):
    with pytest.raises(error) as info:
        copy_to(src, dst)
    assert {name: getattr(info.value, name) for name in attrs} == attrs


def test_nested_structs_are_copied_field_by_field():
    parts = complex_parts()
    dst = copy_to(ComplexSrc(**parts), ComplexDst())
    assert dst.embed.basic_src is not parts["embed"].basic_src


def test_copy_is_shallow():
    src = person()
    dst = copy_to(src, SimpleDst())
    assert dst.friends is src.friends


@pytest.mark.parametrize(
    "src, expected",
    [
        (EmbedSrc(), BasicSrc(name="keep", age=1)),
        (EmbedSrc(basic_src=BasicSrc(name="xiaowang", age=20)), BasicSrc(name="xiaowang", age=20)),
    ],
)
def test_existing_reference_is_kept(src, expected):
    existing = BasicSrc(name="keep", age=1)
    dst = copy_to(src, EmbedDst(basic_src=existing))
    assert dst.basic_src is existing
    assert existing == expected