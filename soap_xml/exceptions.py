"""soap_xml 包自定义异常"""

from typing import Optional, Tuple


class SoapXmlError(Exception):
    """SOAP XML 处理基础异常"""
    pass


class XmlStreamError(SoapXmlError):
    """底层分词器/写出器报告的流错误"""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        """
        Args:
            message: 错误信息
            position: 出错位置 (行, 列)，底层未提供时为 None
        """
        super().__init__(message)
        self.position = position


class XmlParseError(SoapXmlError):
    """文档级解析错误"""
    pass


class EmptyDocumentError(XmlParseError):
    """文档为空或无效：解析结束时没有得到根元素"""

    def __init__(self, message: str = "文档为空或无效"):
        super().__init__(message)
        # 该错误不携带位置信息
        self.position = (0, 0)


class MultipleRootsError(XmlParseError):
    """解析过程中出现第二个顶层元素"""
    pass


class XmlFileNotFoundError(SoapXmlError):
    """XML 文件不存在错误"""
    pass


class XmlFormatError(SoapXmlError):
    """XML 格式化错误"""
    pass


class XmlDecodingError(XmlFormatError):
    """格式化缓冲区不是合法文本"""
    pass
