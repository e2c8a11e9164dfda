"""soap_xml 配置"""

import codecs

from pydantic import BaseModel, Field, field_validator

from ..events import DEFAULT_CHUNK_SIZE


class SoapXmlSettings(BaseModel):
    """解析与格式化配置"""
    encoding: str = Field(default="utf-8", description="输入/输出编码")
    pretty_print: bool = Field(default=False, description="是否美化输出")
    xml_declaration: bool = Field(default=False, description="是否包含 XML 声明")
    indent_string: str = Field(default="  ", description="美化输出时每层缩进字符串")
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, description="解析时每次读取的字节数")

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"未知编码: {value}")
        return value
