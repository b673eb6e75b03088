import logging
import sys


class GobanLogger:
    """システム全体のロギングを統括するクラス"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(GobanLogger, cls).__new__(cls)
            cls._instance._setup_logger()
        return cls._instance

    def _setup_logger(self):
        self.logger = logging.getLogger("GobanSVG")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # フォーマット定義: [時刻] [レイヤー] [レベル] メッセージ
        formatter = logging.Formatter(
            '[%(asctime)s] [%(layer)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # SVG本体はstdoutに書かれる可能性があるため、ログはstderrへ
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

    def set_level(self, level):
        self.logger.setLevel(level)

    def log(self, level, message, layer="SYSTEM"):
        """共通ログ出力メソッド"""
        self.logger.log(level, message, extra={'layer': layer.upper()})

    def debug(self, message, layer="SYSTEM"):
        self.log(logging.DEBUG, message, layer)

    def info(self, message, layer="SYSTEM"):
        self.log(logging.INFO, message, layer)

    def warning(self, message, layer="SYSTEM"):
        self.log(logging.WARNING, message, layer)

    def error(self, message, layer="SYSTEM"):
        self.log(logging.ERROR, message, layer)


# Global Singleton Instance
logger = GobanLogger()
