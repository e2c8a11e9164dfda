"""XML 事件流

把 lxml 解析器的目标回调转换成按需拉取的事件序列。
"""

import codecs
import logging
from dataclasses import dataclass
from typing import IO, Iterator, List, Optional, Union
from lxml import etree

from .element import Name
from .namespace import NamespaceHandler
from .exceptions import XmlStreamError


logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 16384

# XML 规范中的空白字符
XML_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class StartElement:
    """元素开始"""
    name: Name


@dataclass(frozen=True)
class EndElement:
    """元素结束"""
    name: Name


@dataclass(frozen=True)
class Characters:
    """文本"""
    text: str


@dataclass(frozen=True)
class Ignorable:
    """可忽略的事件：空白、注释、处理指令、文档类型声明"""
    kind: str
    text: Optional[str] = None


XmlEvent = Union[StartElement, EndElement, Characters, Ignorable]


class _EventCollector:
    """lxml 解析目标：收集回调产生的事件"""

    def __init__(self):
        self._events: List[XmlEvent] = []
        self._text: List[str] = []
        self._namespaces = NamespaceHandler()

    def start(self, tag, attrib, nsmap):
        self._flush_text()
        self._namespaces.push_scope(nsmap)
        self._events.append(StartElement(self._namespaces.name_for(tag)))

    def end(self, tag):
        self._flush_text()
        self._events.append(EndElement(self._namespaces.name_for(tag)))
        self._namespaces.pop_scope()

    def data(self, data):
        # lxml 可能把一段文本拆成多次回调，在下一个标记处合并
        self._text.append(data)

    def comment(self, text):
        self._flush_text()
        self._events.append(Ignorable("comment", text))

    def pi(self, target, data=None):
        self._flush_text()
        self._events.append(Ignorable("processing-instruction", target))

    def doctype(self, name, pubid, system):
        self._events.append(Ignorable("doctype", name))

    def close(self):
        self._flush_text()
        return None

    def drain(self) -> List[XmlEvent]:
        """取出已收集的事件"""
        events, self._events = self._events, []
        return events

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text)
        self._text = []
        if text.strip(XML_WHITESPACE):
            self._events.append(Characters(text))
        else:
            self._events.append(Ignorable("whitespace", text))


def iter_events(
    stream: IO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    text_encoding: str = "utf-8"
) -> Iterator[XmlEvent]:
    """
    逐块读取流并产生 XML 事件

    文本流按 text_encoding 转成字节，并以该编码覆盖文档声明中的 encoding；
    字节流按文档自身的声明解码。

    Args:
        stream: 可读流（字节流或文本流）
        chunk_size: 每次读取的大小
        text_encoding: 文本流转字节使用的编码

    Yields:
        XmlEvent 事件

    Raises:
        XmlStreamError: lxml 报告的分词/结构错误，或文本无法按 text_encoding 编码
    """
    collector = _EventCollector()
    encoder = codecs.getincrementalencoder(text_encoding)()
    parser = None

    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            is_text = isinstance(chunk, str)
            if parser is None:
                parser = etree.XMLParser(
                    target=collector,
                    encoding=text_encoding if is_text else None,
                    resolve_entities=False,
                    no_network=True
                )
            if is_text:
                chunk = encoder.encode(chunk)
            parser.feed(chunk)
            yield from collector.drain()

        # 空流不交给 lxml，由调用方按空文档处理
        if parser is not None:
            parser.close()
            yield from collector.drain()
    except etree.LxmlError as e:
        position = getattr(e, "position", None)
        logger.debug(f"XML 事件流错误: {e} (位置: {position})")
        raise XmlStreamError(str(e), position=position) from e
    except UnicodeEncodeError as e:
        raise XmlStreamError(f"文本无法按 {text_encoding} 编码: {e}") from e
