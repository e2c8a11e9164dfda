"""SOAP 消息的 XML 元素模型

只保留元素名与有序内容（文本/子元素），不支持属性。
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union


class Name:
    """
    元素的限定名

    prefix 只影响输出形式，不参与相等比较。namespace 存在而 prefix 为空时，
    表示该元素（及其后代）的默认命名空间。
    """

    __slots__ = ("local_name", "namespace", "prefix")

    def __init__(
        self,
        local_name: str,
        namespace: Optional[str] = None,
        prefix: Optional[str] = None
    ):
        if not local_name:
            raise ValueError("本地名不能为空")
        if prefix is not None and not prefix:
            raise ValueError("前缀不能为空字符串，默认命名空间请使用 None")
        self.local_name = str(local_name)
        self.namespace = None if namespace is None else str(namespace)
        self.prefix = None if prefix is None else str(prefix)

    def matches(self, other: "Name") -> bool:
        """
        比较两个名称（只比较 local_name 与 namespace）

        Args:
            other: 另一个名称

        Returns:
            是否指向同一个限定名
        """
        return (
            self.local_name == other.local_name
            and self.namespace == other.namespace
        )

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self.matches(other)

    def __hash__(self):
        return hash((self.local_name, self.namespace))

    @property
    def clark(self) -> str:
        """Clark 记法的标签名，如 {urn:x}foo"""
        if self.namespace is None:
            return self.local_name
        return f"{{{self.namespace}}}{self.local_name}"

    @property
    def qualified(self) -> str:
        """带前缀的标签名，如 p:foo"""
        if self.namespace is not None and self.prefix is not None:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name

    def __repr__(self):
        return (
            f"Name(local_name={self.local_name!r}, "
            f"namespace={self.namespace!r}, prefix={self.prefix!r})"
        )


@dataclass(frozen=True)
class Text:
    """文本内容"""
    text: str


@dataclass(frozen=True)
class Child:
    """子元素内容"""
    element: "Element"


ContentItem = Union[Text, Child]


class Element:
    """
    XML 元素

    content 按文档顺序保存文本与子元素，混合内容的顺序有意义。

    示例用法:
        envelope = Element.new_ns_prefix("Envelope", SOAP_NS, "soap")
        body = Element.new_ns_prefix("Body", SOAP_NS, "soap")
        body.push_text("hello")
        envelope.push_child(body)
    """

    def __init__(self, name: Name, content: Optional[List[ContentItem]] = None):
        self.name = name
        self.content: List[ContentItem] = list(content) if content else []

    @classmethod
    def new(cls, local_name: str) -> "Element":
        """创建不带命名空间的空元素"""
        return cls(Name(local_name))

    @classmethod
    def new_default_ns(cls, local_name: str, namespace: str) -> "Element":
        """创建带默认命名空间（无前缀）的空元素"""
        return cls(Name(local_name, namespace))

    @classmethod
    def new_ns_prefix(cls, local_name: str, namespace: str, prefix: str) -> "Element":
        """创建带命名空间与前缀的空元素"""
        return cls(Name(local_name, namespace, prefix))

    def push_text(self, text: str) -> None:
        """追加文本内容"""
        self.content.append(Text(str(text)))

    def push_child(self, child: "Element") -> None:
        """追加子元素"""
        if not isinstance(child, Element):
            raise TypeError(f"子元素必须是 Element，实际为 {type(child).__name__}")
        self.content.append(Child(child))

    def children(self) -> Iterator["Element"]:
        """按顺序遍历直接子元素"""
        for item in self.content:
            if isinstance(item, Child):
                yield item.element

    @property
    def text(self) -> str:
        """元素自身的文本（不含子元素文本）"""
        return "".join(item.text for item in self.content if isinstance(item, Text))

    def find(self, local_name: str, namespace: Optional[str] = None) -> Optional["Element"]:
        """
        查找第一个名称匹配的直接子元素

        Args:
            local_name: 本地名
            namespace: 命名空间 URI

        Returns:
            找到的元素，未找到返回 None
        """
        target = Name(local_name, namespace)
        for child in self.children():
            if child.name.matches(target):
                return child
        return None

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented
        return self.name.matches(other.name) and self.content == other.content

    __hash__ = None

    def __repr__(self):
        return f"Element(name={self.name!r}, content={self.content!r})"
