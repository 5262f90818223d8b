"""
繁體中文 (zh-TW) messages.
"""

MESSAGES = {
    # ───────────────────────────── CLI ─────────────────────────────
    "cli.about": (
        "從標準輸入或指定檔案讀取文字，並以可設定的延遲按字元或按行列印。\n"
        "工具名稱靈感來自慢掃描電視 (SSTV)"
    ),
    "cli.delay": (
        '設定字元列印延遲（預設單位：秒/s）。支援基本運算（+、*）。'
        '完整語法請查看 "--help"（預設：{default}）'
    ),
    "cli.full_width_delay": "設定全形字元（如中日韓文字）的延遲（預設：--delay 的兩倍）",
    "cli.control_char_delay": "設定控制字元（如換行符號、定位字元）的延遲（預設：0）",
    "cli.tail_delay": "在最後一個字元或最後一行之後也進行延遲",
    "cli.line_mode": "啟用按行列印模式",
    "cli.hide_cursor": "列印期間隱藏終端機游標，並在結束後恢復",
    "cli.total_duration": "將整個輸出大致分佈在該總時長內（覆寫 --delay）",
    "cli.log_level": "寫入標準錯誤的診斷日誌等級（預設：{default}）",
    "cli.files": '輸入檔案路徑（支援多個檔案）。參數為 "-" 時從標準輸入讀取',
    "cli.version": "顯示版本號",
    "cli.help": "顯示說明訊息並結束",

    # ──────────────────────── UNIT REFERENCE ───────────────────────
    "units.title": "時間單位參考：",
    "units.header.unit": "單位",
    "units.header.scale": "時間尺度",
    "units.header.aliases": "支援的別名（拉丁字母別名不區分大小寫）",
    "units.name.YEAR": "年",
    "units.name.MONTH": "月",
    "units.name.WEEK": "週",
    "units.name.DAY": "天",
    "units.name.HOUR": "小時",
    "units.name.MINUTE": "分鐘",
    "units.name.SECOND": "秒",
    "units.name.MILLISECOND": "毫秒",
    "units.name.MICROSECOND": "微秒",
    "units.name.NANOSECOND": "奈秒",
    "units.examples": (
        "範例：\n"
        "  1.5h30m       => 1.5 小時 + 30 分鐘 = 2 小時\n"
        "  100ms * 2     => 100ms * 2 = 200ms\n"
        "  1 + 1 + 100ms => 1s + 1s + 100ms = 2100ms"
    ),

    # ─────────────────────────── ERRORS ────────────────────────────
    "error.convert_string_to_duration": (
        '無效的時間格式參數 {value!r}：{reason}。請使用 "--help" 查看時間格式範例'
    ),
    "error.set_ctrlc_handle_error": (
        "註冊 Ctrl+C 處理程式失敗。異常結束時終端機游標可能無法正確恢復。\n"
        "你可以透過關閉標準錯誤來隱藏此訊息。\n{error}"
    ),
    "error.io_error_on_slow_scan_print": "慢掃描列印過程中發生 I/O 錯誤\n{error}",

    # ─────────────────────────── INPUT ─────────────────────────────
    "input.cannot_open_uri": "無法開啟 '{uri}'：{source}",
    "input.uri_is_empty": "uri 不能為空",
}
