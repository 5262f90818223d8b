"""
Message Catalogues

Static, read-only message tables keyed by locale tag.
"""

from types import MappingProxyType

from .en_us import MESSAGES as EN_US
from .zh_cn import MESSAGES as ZH_CN
from .zh_hk import MESSAGES as ZH_HK
from .zh_tw import MESSAGES as ZH_TW

CATALOGS = MappingProxyType({
    "en-US": MappingProxyType(EN_US),
    "zh-CN": MappingProxyType(ZH_CN),
    "zh-TW": MappingProxyType(ZH_TW),
    "zh-HK": MappingProxyType(ZH_HK),
})

__all__ = ["CATALOGS"]
