"""SOAP XML 包 - 面向 SOAP 消息编解码的精简 XML 树

提供带命名空间的元素模型、事件驱动解析器、递归序列化器与格式化器。
不支持属性、注释、处理指令与 DTD。
"""

from pathlib import Path
from typing import IO, Optional, Type, TypeVar, Union

from .element import Element, Name, Text, Child
from .events import StartElement, EndElement, Characters, Ignorable, iter_events
from .parser import XmlParser
from .serializer import serialize
from .formatter import XmlFormatter, to_string
from .namespace import NamespaceHandler
from .conversion import ToXml, FromXml
from .config.settings import SoapXmlSettings
from .exceptions import (
    SoapXmlError,
    XmlStreamError,
    XmlParseError,
    EmptyDocumentError,
    MultipleRootsError,
    XmlFileNotFoundError,
    XmlFormatError,
    XmlDecodingError
)


__version__ = "0.1.0"
__all__ = [
    "SoapXml",
    "Element",
    "Name",
    "Text",
    "Child",
    "StartElement",
    "EndElement",
    "Characters",
    "Ignorable",
    "iter_events",
    "XmlParser",
    "serialize",
    "XmlFormatter",
    "to_string",
    "NamespaceHandler",
    "ToXml",
    "FromXml",
    "SoapXmlSettings",
    "SoapXmlError",
    "XmlStreamError",
    "XmlParseError",
    "EmptyDocumentError",
    "MultipleRootsError",
    "XmlFileNotFoundError",
    "XmlFormatError",
    "XmlDecodingError",
]

T = TypeVar("T", bound=FromXml)


class SoapXml:
    """
    SOAP XML 核心类 - 统一的编解码入口

    示例用法:
        core = SoapXml(pretty_print=True)
        envelope = core.parse_string(response_text)
        body = envelope.find("Body", SOAP_ENV_NS)

        request = core.encode(GetPrice(item="Apple"))
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        pretty_print: bool = False,
        xml_declaration: bool = False,
        indent_string: str = "  ",
        chunk_size: Optional[int] = None,
        settings: Optional[SoapXmlSettings] = None
    ):
        """
        初始化 SoapXml

        Args:
            encoding: 编码
            pretty_print: 是否美化输出
            xml_declaration: 是否包含 XML 声明
            indent_string: 每层缩进字符串
            chunk_size: 解析时每次读取的字节数
            settings: 完整配置（提供时忽略其他参数）
        """
        if settings is None:
            options = dict(
                encoding=encoding,
                pretty_print=pretty_print,
                xml_declaration=xml_declaration,
                indent_string=indent_string
            )
            if chunk_size is not None:
                options["chunk_size"] = chunk_size
            settings = SoapXmlSettings(**options)
        self.settings = settings

        self.parser = XmlParser(
            encoding=settings.encoding,
            chunk_size=settings.chunk_size
        )
        self.formatter = XmlFormatter(
            encoding=settings.encoding,
            pretty_print=settings.pretty_print,
            xml_declaration=settings.xml_declaration,
            indent_string=settings.indent_string
        )

    def parse(self, stream: IO) -> Element:
        """解析可读流"""
        return self.parser.parse(stream)

    def parse_string(self, xml: Union[str, bytes]) -> Element:
        """解析 XML 字符串"""
        return self.parser.parse_string(xml)

    def parse_file(self, file_path: Union[str, Path]) -> Element:
        """解析 XML 文件"""
        return self.parser.parse_file(file_path)

    def serialize(self, element: Element, sink: IO[bytes]) -> None:
        """序列化到可写字节流"""
        self.formatter.serialize(element, sink)

    def format_element(self, element: Element) -> str:
        """格式化元素为字符串"""
        return self.formatter.format_element(element)

    def write_file(self, element: Element, file_path: Union[str, Path]) -> None:
        """写入元素到文件"""
        self.formatter.write_file(element, file_path)

    def encode(self, obj: ToXml) -> str:
        """
        把领域对象编码为 XML 字符串

        Args:
            obj: 实现 ToXml 的对象

        Returns:
            XML 字符串
        """
        return self.format_element(obj.to_xml())

    def decode(self, xml: Union[str, bytes], cls: Type[T]) -> T:
        """
        把 XML 字符串解码为领域对象

        Args:
            xml: XML 文本或字节
            cls: 实现 FromXml 的类型

        Returns:
            cls 实例
        """
        return cls.from_xml(self.parse_string(xml))
