"""领域对象与 Element 之间的转换协议"""

from abc import ABC, abstractmethod

from .element import Element


class ToXml(ABC):
    """可以转换为 Element 的对象"""

    @abstractmethod
    def to_xml(self) -> Element:
        """由当前对象创建 Element"""


class FromXml(ABC):
    """可以由 Element 创建的对象"""

    @classmethod
    @abstractmethod
    def from_xml(cls, element: Element) -> "FromXml":
        """由 Element 创建实例"""
