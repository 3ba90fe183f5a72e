"""术语条目处理异常"""


class GlossaryError(ValueError):
    """术语条目数据错误的基类"""


class MalformedEntryError(GlossaryError):
    """服务端条目不完整（例如缺少 srcLang 对应的源术语）

    Attributes:
        entry_id: 出错条目的 id
    """

    def __init__(self, message: str, entry_id=None) -> None:
        super().__init__(message)
        self.entry_id = entry_id
