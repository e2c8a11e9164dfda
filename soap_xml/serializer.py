"""XML 序列化器

深度优先遍历元素树，通过 lxml 的增量写出器（etree.xmlfile）输出。
"""

from contextlib import contextmanager
from typing import IO, List
from lxml import etree

from .element import Child, Element, Name, Text
from .namespace import NamespaceHandler
from .exceptions import XmlStreamError


class _Scope:
    """已打开元素的写出状态"""

    __slots__ = ("wrote_text", "wrote_markup")

    def __init__(self):
        self.wrote_text = False
        self.wrote_markup = False


class EventWriter:
    """
    元素事件写出器

    缩进模式下在标记之间插入换行与缩进；元素一旦写入文本，
    其内部不再插入任何空白。
    """

    def __init__(self, xf, indent: bool = False, indent_string: str = "  "):
        """
        Args:
            xf: etree.xmlfile 打开的写出上下文
            indent: 是否缩进
            indent_string: 每层缩进字符串
        """
        self._xf = xf
        self.indent = indent
        self.indent_string = indent_string
        self._scopes: List[_Scope] = []

    @contextmanager
    def element(self, name: Name):
        """写出开始标签，退出时写出结束标签"""
        tag, nsmap = NamespaceHandler.declaration_for(name)

        if self._scopes:
            parent = self._scopes[-1]
            if self.indent and not parent.wrote_text:
                self._newline(len(self._scopes))
            parent.wrote_markup = True

        with self._xf.element(tag, nsmap=nsmap):
            scope = _Scope()
            self._scopes.append(scope)
            yield
            self._scopes.pop()
            if self.indent and scope.wrote_markup and not scope.wrote_text:
                self._newline(len(self._scopes))

    def characters(self, text: str) -> None:
        """写出文本"""
        if self._scopes:
            self._scopes[-1].wrote_text = True
        self._xf.write(text)

    def _newline(self, depth: int) -> None:
        self._xf.write("\n" + self.indent_string * depth)


def write_element(writer: EventWriter, element: Element) -> None:
    """
    递归写出元素

    Args:
        writer: 事件写出器
        element: 元素
    """
    with writer.element(element.name):
        for item in element.content:
            if isinstance(item, Text):
                writer.characters(item.text)
            elif isinstance(item, Child):
                write_element(writer, item.element)


def serialize(
    element: Element,
    sink: IO[bytes],
    indent: bool = False,
    indent_string: str = "  ",
    encoding: str = "utf-8",
    xml_declaration: bool = False
) -> None:
    """
    序列化元素树到可写字节流

    Args:
        element: 根元素
        sink: 可写字节流
        indent: 是否缩进
        indent_string: 每层缩进字符串
        encoding: 输出编码
        xml_declaration: 是否写出 XML 声明

    Raises:
        XmlStreamError: 写出失败（非法名称/字符、编码或 IO 错误）
    """
    try:
        with etree.xmlfile(sink, encoding=encoding) as xf:
            if xml_declaration:
                xf.write_declaration()
            write_element(EventWriter(xf, indent=indent, indent_string=indent_string), element)
    except (etree.LxmlError, ValueError, LookupError, OSError) as e:
        raise XmlStreamError(f"序列化失败: {e}", position=getattr(e, "position", None)) from e
