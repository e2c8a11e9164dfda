"""XML 解析器"""

import io
import logging
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from .element import Element, Name
from .events import (
    DEFAULT_CHUNK_SIZE,
    Characters,
    EndElement,
    StartElement,
    XmlEvent,
    iter_events,
)
from .exceptions import (
    EmptyDocumentError,
    MultipleRootsError,
    SoapXmlError,
    XmlFileNotFoundError,
)


logger = logging.getLogger(__name__)


class XmlParser:
    """XML 解析器：把事件流还原为单根元素树"""

    def __init__(self, encoding: str = "utf-8", chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        初始化解析器

        Args:
            encoding: 文本输入转字节时使用的编码
            chunk_size: 每次从流中读取的大小
        """
        self.encoding = encoding
        self.chunk_size = chunk_size

    def parse(self, stream: IO) -> Element:
        """
        解析可读流

        Args:
            stream: 包含单个 XML 文档的可读流

        Returns:
            根元素

        Raises:
            XmlStreamError: 分词/结构错误
            EmptyDocumentError: 没有得到根元素
            MultipleRootsError: 出现多个顶层元素
        """
        try:
            return self.build_tree(iter_events(stream, self.chunk_size, self.encoding))
        except SoapXmlError as e:
            logger.error(f"XML 解析失败: {e}")
            raise

    def parse_string(self, xml: Union[str, bytes]) -> Element:
        """
        解析 XML 字符串

        Args:
            xml: XML 文本或字节；文本中的 encoding 声明不参与解码

        Returns:
            根元素
        """
        if isinstance(xml, str):
            return self.parse(io.StringIO(xml))
        return self.parse(io.BytesIO(xml))

    def parse_file(self, file_path: Union[str, Path]) -> Element:
        """
        解析 XML 文件

        Args:
            file_path: XML 文件路径

        Returns:
            根元素

        Raises:
            XmlFileNotFoundError: 文件不存在
        """
        path = Path(file_path)
        if not path.exists():
            raise XmlFileNotFoundError(f"文件不存在: {file_path}")

        with open(path, "rb") as f:
            return self.parse(f)

    @staticmethod
    def build_tree(events: Iterable[XmlEvent]) -> Element:
        """
        根据事件序列构建元素树

        结束标签从栈顶向下查找最近的同名元素并移除，不要求严格嵌套；
        中间未闭合的元素留在栈中，最终被丢弃。

        Args:
            events: XML 事件序列

        Returns:
            根元素

        Raises:
            EmptyDocumentError: 没有得到根元素
            MultipleRootsError: 出现第二个顶层元素
        """
        stack: List[Element] = []
        result: Optional[Element] = None

        for event in events:
            if isinstance(event, StartElement):
                stack.append(Element(event.name))

            elif isinstance(event, Characters):
                if stack:
                    stack[-1].push_text(event.text)

            elif isinstance(event, EndElement):
                index = _find_nearest(stack, event.name)
                if index is None:
                    logger.debug(f"忽略没有匹配开始标签的结束标签: {event.name.qualified}")
                    continue

                element = stack.pop(index)
                if stack:
                    stack[-1].push_child(element)
                elif result is None:
                    result = element
                else:
                    raise MultipleRootsError(
                        f"发现多个顶层元素: {result.name.qualified}, {element.name.qualified}"
                    )

        if result is None:
            raise EmptyDocumentError()
        return result


def _find_nearest(stack: List[Element], name: Name) -> Optional[int]:
    """从栈顶向下查找第一个同名元素的下标"""
    for index in range(len(stack) - 1, -1, -1):
        if stack[index].name.matches(name):
            return index
    return None
