"""
hanyutils 命令行工具
"""

import argparse
import os
import sys

import orjson


def _lookup_record(char: str):
    from hanyutils.engine import lookup

    hanzi = lookup(char)
    if hanzi is None:
        return None
    return {
        "char": hanzi.char,
        "pron": hanzi.pron.marked(),
        "pron_tw": hanzi.pron_tw.marked() if hanzi.pron_tw else None,
        "alt": [p.marked() for p in hanzi.alt],
        "numbered": hanzi.pron.numbered(),
    }


def main(argv=None):
    """命令行入口"""
    parser = argparse.ArgumentParser(
        prog="hanyutils",
        description="hanyutils - 汉字、拼音、注音互转",
    )
    parser.add_argument("--log-level", default=None, help="日志级别 (默认读取 HANYUTILS_LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    modes = ["exclusive", "words", "mixed"]

    # 拼音 / 注音 转换命令
    mark_parser = subparsers.add_parser("mark", help="数字标调拼音 → 符号标调")
    number_parser = subparsers.add_parser("number", help="符号标调拼音 → 数字标调")
    zhuyin_parser = subparsers.add_parser("zhuyin", help="拼音 → 注音")
    pinyin_parser = subparsers.add_parser("pinyin", help="注音 → 拼音")
    for sub in (mark_parser, number_parser, zhuyin_parser, pinyin_parser):
        sub.add_argument("text", help="输入文本")
        sub.add_argument("-m", "--mode", choices=modes, default=None, help="解析模式 (默认: words)")
    pinyin_parser.add_argument("-n", "--numbered", action="store_true", help="输出数字标调")

    # hanzi 命令
    hanzi_parser = subparsers.add_parser("hanzi", help="汉字 → 拼音/注音")
    hanzi_parser.add_argument("text", help="汉字文本")
    hanzi_parser.add_argument(
        "-f", "--format", choices=["marked", "numbered", "zhuyin"], default="marked",
        help="输出格式 (默认: marked)",
    )
    hanzi_parser.add_argument("-a", "--all", action="store_true", help="列出全部读音")

    # lookup 命令
    lookup_parser = subparsers.add_parser("lookup", help="查询单个汉字 (JSON 输出)")
    lookup_parser.add_argument("char", help="汉字")

    # server 命令
    server_parser = subparsers.add_parser("server", help="启动 API 服务")
    server_parser.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=3000, help="端口 (默认: 3000)")

    # version 命令
    subparsers.add_parser("version", help="显示版本")

    args = parser.parse_args(argv)

    import hanyutils
    from hanyutils.engine import ConverterConfig, HanyuError, setup_from_config

    config = ConverterConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    logger = setup_from_config(config)
    mode = getattr(args, "mode", None) or config.default_mode

    try:
        if args.command == "mark":
            print(hanyutils.mark_pinyin(args.text, mode))

        elif args.command == "number":
            print(hanyutils.number_pinyin(args.text, mode))

        elif args.command == "zhuyin":
            print(hanyutils.pinyin_to_zhuyin(args.text, mode))

        elif args.command == "pinyin":
            if args.numbered:
                print(hanyutils.zhuyin_to_numbered_pinyin(args.text, mode))
            else:
                print(hanyutils.zhuyin_to_marked_pinyin(args.text, mode))

        elif args.command == "hanzi":
            converter = hanyutils.all_pronunciations if args.all else hanyutils.common_pronunciation
            if args.format == "numbered":
                print(hanyutils.to_numbered_pinyin(args.text, converter))
            elif args.format == "zhuyin":
                print(hanyutils.to_zhuyin(args.text, converter))
            else:
                print(hanyutils.to_marked_pinyin(args.text, converter))

        elif args.command == "lookup":
            record = _lookup_record(args.char)
            if record is None:
                print(f"未知汉字: {args.char}", file=sys.stderr)
                sys.exit(1)
            print(orjson.dumps(record).decode("utf-8"))

        elif args.command == "server":
            from hanyutils.api.server import main as server_main
            os.environ["HOST"] = args.host
            os.environ["PORT"] = str(args.port)
            server_main()

        elif args.command == "version":
            print(f"hanyutils v{hanyutils.__version__}")

        else:
            parser.print_help()
            sys.exit(1)

    except HanyuError as e:
        logger.debug(f"转换失败: {type(e).__name__}: {e}")
        print(f"错误: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
