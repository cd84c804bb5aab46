"""Slack通知の送信に関する例外"""


class SlonError(Exception):
    """slon関連のエラーの基底クラス"""


class ConfigurationError(SlonError):
    """送信前に検出される設定不備のエラー（ブロックなし、エンドポイント未指定など）"""


class NetworkError(SlonError):
    """DNS解決・TLS・接続・タイムアウトなど通信レイヤーで失敗した場合のエラー"""


class DeliveryError(SlonError):
    """HTTPステータスが2xx以外だった場合のエラー"""

    def __init__(self, message: str, status: int, body: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            status: HTTPステータスコード
            body: レスポンスボディ（生文字列）
        """
        super().__init__(message)
        self.status = status
        self.body = body


class ProtocolError(SlonError):
    """2xxレスポンスのボディを解釈できなかった場合のエラー"""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body


class ApplicationError(SlonError):
    """Slack APIが ok: false を返した場合のエラー"""

    def __init__(self, message: str, error_code: str, body: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            error_code: Slack APIから返されたエラーコード（未設定なら"(null)"）
            body: レスポンスボディ（生文字列）
        """
        super().__init__(message)
        self.error_code = error_code
        self.body = body
