import typing

import pydantic as pc

Byte: typing.TypeAlias = typing.Annotated[int, pc.Field(ge=0, le=255)]

Percentage: typing.TypeAlias = typing.Annotated[int, pc.Field(ge=0, le=100)]

Degree: typing.TypeAlias = typing.Annotated[int, pc.Field(ge=0, le=360)]
