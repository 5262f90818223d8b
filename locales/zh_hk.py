"""
繁體中文 (zh-HK) messages.

Shares the zh-TW catalogue, with Hong Kong wording where it differs.
"""

from locales.zh_tw import MESSAGES as ZH_TW_MESSAGES

MESSAGES = {
    **ZH_TW_MESSAGES,
    "cli.hide_cursor": "列印期間隱藏終端機光標，並在結束後恢復",
    "error.set_ctrlc_handle_error": (
        "註冊 Ctrl+C 處理程式失敗。異常結束時終端機光標可能無法正確恢復。\n"
        "你可以透過關閉標準錯誤來隱藏此訊息。\n{error}"
    ),
    "units.name.NANOSECOND": "納秒",
}
