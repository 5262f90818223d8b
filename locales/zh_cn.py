"""
简体中文 (zh-CN) messages.
"""

MESSAGES = {
    # ───────────────────────────── CLI ─────────────────────────────
    "cli.about": (
        "从标准输入或指定文件读取文本，并以可配置的延迟按字符或按行打印。\n"
        "工具名称灵感来自慢扫描电视 (SSTV)"
    ),
    "cli.delay": (
        '设置字符打印延迟（默认单位：秒/s）。支持基本运算（+、*）。'
        '完整语法请查看 "--help"（默认：{default}）'
    ),
    "cli.full_width_delay": "设置全角字符（如中日韩文字）的延迟（默认：--delay 的两倍）",
    "cli.control_char_delay": "设置控制字符（如换行符、制表符）的延迟（默认：0）",
    "cli.tail_delay": "在最后一个字符或最后一行之后也进行延迟",
    "cli.line_mode": "启用按行打印模式",
    "cli.hide_cursor": "打印期间隐藏终端光标，并在退出后恢复",
    "cli.total_duration": "将整个输出大致分布在该总时长内（覆盖 --delay）",
    "cli.log_level": "写入标准错误的诊断日志级别（默认：{default}）",
    "cli.files": '输入文件路径（支持多个文件）。参数为 "-" 时从标准输入读取',
    "cli.version": "显示版本号",
    "cli.help": "显示帮助信息并退出",

    # ──────────────────────── UNIT REFERENCE ───────────────────────
    "units.title": "时间单位参考：",
    "units.header.unit": "单位",
    "units.header.scale": "时间尺度",
    "units.header.aliases": "支持的别名（拉丁字母别名不区分大小写）",
    "units.name.YEAR": "年",
    "units.name.MONTH": "月",
    "units.name.WEEK": "周",
    "units.name.DAY": "天",
    "units.name.HOUR": "小时",
    "units.name.MINUTE": "分钟",
    "units.name.SECOND": "秒",
    "units.name.MILLISECOND": "毫秒",
    "units.name.MICROSECOND": "微秒",
    "units.name.NANOSECOND": "纳秒",
    "units.examples": (
        "示例：\n"
        "  1.5h30m       => 1.5 小时 + 30 分钟 = 2 小时\n"
        "  100ms * 2     => 100ms * 2 = 200ms\n"
        "  1 + 1 + 100ms => 1s + 1s + 100ms = 2100ms"
    ),

    # ─────────────────────────── ERRORS ────────────────────────────
    "error.convert_string_to_duration": (
        '无效的时间格式参数 {value!r}：{reason}。请使用 "--help" 查看时间格式示例'
    ),
    "error.set_ctrlc_handle_error": (
        "注册 Ctrl+C 处理程序失败。异常退出时终端光标可能无法正确恢复。\n"
        "你可以通过关闭标准错误来屏蔽此消息。\n{error}"
    ),
    "error.io_error_on_slow_scan_print": "慢扫描打印过程中发生 I/O 错误\n{error}",

    # ─────────────────────────── INPUT ─────────────────────────────
    "input.cannot_open_uri": "无法打开 '{uri}'：{source}",
    "input.uri_is_empty": "uri 不能为空",
}
