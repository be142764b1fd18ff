"""Translation engine implementations.

This package contains concrete implementations of the TransInterface for the supported
translation services. Importing it registers every engine with TransInterface.registered.

Modules:
- AlibabaTranslation: Alibaba web translation, no credentials required.
- BaiduTranslation: Baidu general translation API (MD5-signed).
- CaiyunTranslation: Caiyun (LingoCloud) translator API (token header).
- MyMemoryTranslation: MyMemory translation memory API, optional contact email.
- YoudaoTranslation: Youdao text translation API (SHA-256 v3 signature).
"""

from core.trans.engines.trans_alibaba import AlibabaTranslation
from core.trans.engines.trans_baidu import BaiduTranslation
from core.trans.engines.trans_caiyun import CaiyunTranslation
from core.trans.engines.trans_mymemory import MyMemoryTranslation
from core.trans.engines.trans_youdao import YoudaoTranslation

__all__: list[str] = [
    "AlibabaTranslation",
    "BaiduTranslation",
    "CaiyunTranslation",
    "MyMemoryTranslation",
    "YoudaoTranslation",
]
