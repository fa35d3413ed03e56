"""
Polymorphic JSON objects, where a string key inside the object (usually
'type') says which shape the rest of it has.  GeoJSON geometries are the
obvious case.

The union base names the key, each variant is a dataclass subclass that
registers its tag:

    class GeoJsonGeometry(TaggedUnion, discriminant="type"):
        pass

    @dataclass
    class GeoJsonPoint(GeoJsonGeometry, tag="Point"):
        coordinates: List[float]|None = field(default=None)

GeoJsonGeometry.from_base({...}) then hands back a GeoJsonPoint (or whichever
variant the tag picks) and to_base() on a variant writes the tag back out.
"""
from typing import ClassVar, Self

from .errors import DecodeError
from .resources import ApiResource


class TaggedUnion(ApiResource):
    """Base for a union of resource variants selected by a discriminant key"""
    discriminant: ClassVar[str] = "type"
    tag: ClassVar[str|None] = None
    _variants: ClassVar[dict[str, type]] = {}

    def __init_subclass__(cls, discriminant: str|None = None, tag: str|None = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if tag is None:
            # a new union base, gets its own registry
            cls._variants = {}
            if discriminant is not None:
                cls.discriminant = discriminant
        else:
            if tag in cls._variants:
                raise TypeError(f"{cls.__name__}: tag {tag!r} already taken by {cls._variants[tag].__name__}")
            cls.tag = tag
            cls._variants[tag] = cls

    @classmethod
    def variants(cls) -> dict[str, type]:
        return dict(cls._variants)

    @classmethod
    def from_base(cls, data: dict) -> Self:
        """
        Called on the union base this picks the variant from the discriminant,
        called on a variant it just decodes as that variant.
        """
        if isinstance(data, cls):
            return data
        if cls.tag is not None:
            return super().from_base(data)
        if not isinstance(data, dict):
            raise DecodeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        tag = data.get(cls.discriminant, None)
        variant = cls._variants.get(tag, None) if isinstance(tag, str) else None
        if variant is None:
            raise DecodeError(f"{cls.__name__}: unknown {cls.discriminant} {tag!r}, "
                              f"expected one of {sorted(cls._variants)}")
        return variant.from_base(data)

    def to_base(self) -> dict:
        if self.tag is None:
            raise TypeError(f"{self.__class__.__name__} is a union base, use one of its variants")
        b = super().to_base()
        b[self.discriminant] = self.tag
        return b

    def __bool__(self) -> bool:
        # a variant with no other fields set is still a meaningful value
        return self.tag is not None
