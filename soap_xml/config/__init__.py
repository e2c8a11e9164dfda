from .settings import SoapXmlSettings

__all__ = ["SoapXmlSettings"]
