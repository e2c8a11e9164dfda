"""XML 命名空间处理器"""

from typing import Dict, List, Optional, Tuple
from lxml import etree

from .element import Name


class NamespaceHandler:
    """
    XML 命名空间处理

    解析时按作用域记录 lxml 报告的命名空间声明，用于还原元素前缀；
    序列化时根据元素名决定标签形式与需要声明的命名空间。
    """

    def __init__(self):
        self._scopes: List[Dict[Optional[str], str]] = []

    def push_scope(self, nsmap: Optional[Dict[Optional[str], str]] = None) -> None:
        """
        进入元素作用域

        Args:
            nsmap: 该元素上新增的命名空间声明（前缀 -> URI，默认命名空间前缀为 None）
        """
        scope = {}
        for prefix, uri in (nsmap or {}).items():
            # 默认命名空间统一用 None 表示
            scope[prefix or None] = uri
        self._scopes.append(scope)

    def pop_scope(self) -> None:
        """离开元素作用域"""
        if self._scopes:
            self._scopes.pop()

    def prefix_for(self, namespace: str) -> Optional[str]:
        """
        查找当前作用域内绑定到指定 URI 的前缀

        内层声明优先；被内层重新绑定到其他 URI 的前缀会被跳过。

        Args:
            namespace: 命名空间 URI

        Returns:
            前缀，默认命名空间或未找到时返回 None
        """
        shadowed = set()
        for scope in reversed(self._scopes):
            for prefix, uri in scope.items():
                if prefix not in shadowed and uri == namespace:
                    return prefix
            shadowed.update(scope)
        return None

    def name_for(self, tag: str) -> Name:
        """
        把 Clark 记法的标签转换为 Name

        Args:
            tag: 如 {urn:x}foo 或 foo

        Returns:
            Name 对象
        """
        qname = etree.QName(tag)
        namespace = qname.namespace
        if namespace is None:
            return Name(qname.localname)
        return Name(qname.localname, namespace, self.prefix_for(namespace))

    @staticmethod
    def declaration_for(name: Name) -> Tuple[str, Optional[Dict[Optional[str], str]]]:
        """
        计算元素开始标签的标签名与命名空间声明

        - 命名空间与前缀都存在: prefix:local，声明 xmlns:prefix
        - 只有命名空间: local，声明默认命名空间 xmlns
        - 都不存在: local，不声明

        默认命名空间的元素以不带命名空间的本地名交给 lxml，
        否则祖先上绑定同一 URI 的前缀会被 lxml 复用到标签上。

        Args:
            name: 元素名

        Returns:
            (标签, nsmap)
        """
        if name.namespace is not None and name.prefix is not None:
            return name.clark, {name.prefix: name.namespace}
        if name.namespace is not None:
            return name.local_name, {None: name.namespace}
        return name.local_name, None
