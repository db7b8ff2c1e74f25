"""Converter configuration.

ConverterConfig is a frozen Pydantic model so it can be shared freely
between converters and threads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from bean_map.core.enums import NamingStyle, TypeMatch


class ConverterConfig(BaseModel):
    """Configuration for bean/map conversion."""

    model_config = ConfigDict(frozen=True)

    naming_style: NamingStyle = NamingStyle.CAMEL
    type_match: TypeMatch = TypeMatch.ASSIGNABLE
    skip_none: bool = False
