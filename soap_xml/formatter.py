"""XML 格式化器"""

import io
import logging
from pathlib import Path
from typing import Union

from .element import Element
from .serializer import serialize
from .exceptions import XmlDecodingError, XmlFormatError, XmlStreamError


logger = logging.getLogger(__name__)


class XmlFormatter:
    """XML 格式化器"""

    def __init__(
        self,
        encoding: str = "utf-8",
        pretty_print: bool = False,
        xml_declaration: bool = False,
        indent_string: str = "  "
    ):
        """
        初始化格式化器

        Args:
            encoding: 输出编码
            pretty_print: 是否美化输出
            xml_declaration: 是否包含 XML 声明
            indent_string: 美化输出时每层缩进字符串
        """
        self.encoding = encoding
        self.pretty_print = pretty_print
        self.xml_declaration = xml_declaration
        self.indent_string = indent_string

    def format_element(self, element: Element) -> str:
        """
        格式化元素为字符串

        Args:
            element: Element 对象

        Returns:
            XML 字符串

        Raises:
            XmlFormatError: 序列化失败
            XmlDecodingError: 输出无法按 encoding 解码
        """
        buffer = io.BytesIO()
        try:
            self.serialize(element, buffer)
        except XmlStreamError as e:
            # 格式化接口只有一种失败类型，位置等细节只保留在 __cause__ 中
            logger.error(f"XML 格式化失败: {e}")
            raise XmlFormatError("XML 格式化失败") from e

        try:
            return buffer.getvalue().decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error(f"XML 输出解码失败: {e}")
            raise XmlDecodingError(f"输出不是合法的 {self.encoding} 文本: {e}") from e

    def serialize(self, element: Element, sink) -> None:
        """
        按当前格式设置序列化到可写字节流

        Args:
            element: Element 对象
            sink: 可写字节流
        """
        serialize(
            element,
            sink,
            indent=self.pretty_print,
            indent_string=self.indent_string,
            encoding=self.encoding,
            xml_declaration=self.xml_declaration
        )

    def write_file(self, element: Element, file_path: Union[str, Path]) -> None:
        """
        写入元素到文件

        Args:
            element: Element 对象
            file_path: 文件路径
        """
        with open(file_path, "wb") as f:
            self.serialize(element, f)


def to_string(element: Element, pretty_print: bool = False) -> str:
    """以 UTF-8 格式化元素"""
    return XmlFormatter(pretty_print=pretty_print).format_element(element)
