"""
ユーザー関連の例外クラス

このモジュールは、ユーザー登録に関する様々な例外を定義します。
入力値の検証、一意性チェック、ストア障害で発生する例外を統一的に管理します。
"""

from typing import Optional


class UserException(Exception):
    """ユーザー関連の基底例外クラス"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidFieldError(UserException):
    """入力値が形式ルールを満たさない場合の例外"""
    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}", "INVALID_FIELD")
        self.field = field
        self.reason = reason


class UserAlreadyExistsError(UserException):
    """一意であるべき値が既に使用されている場合の例外"""
    def __init__(self, message: str = "User already exists", error_code: str = "USER_ALREADY_EXISTS"):
        super().__init__(message, error_code)


class DuplicateIdentifierError(UserAlreadyExistsError):
    """ユーザーIDは既に使用されています。"""
    def __init__(self, uuid: str):
        super().__init__(f"User id '{uuid}' is already in use", "DUPLICATE_IDENTIFIER")
        self.uuid = uuid


class DuplicateEmailError(UserAlreadyExistsError):
    """メールアドレスは既に使用されています。"""
    def __init__(self, email: str):
        super().__init__(f"Email '{email}' is already in use", "DUPLICATE_EMAIL")
        self.email = email


class DuplicateTagNameError(UserAlreadyExistsError):
    """タグ名は既に使用されています。"""
    def __init__(self, tag_name: str):
        super().__init__(f"Tag name '{tag_name}' is already in use", "DUPLICATE_TAG_NAME")
        self.tag_name = tag_name


class UserStoreError(UserException):
    """ユーザーストア層の基底例外"""
    pass


class UserStoreConflictError(UserStoreError):
    """挿入時にデータベースの一意制約違反が発生した場合の例外

    field は違反したカラムに対応するエンティティ属性名
    （"uuid" / "email" / "tag_name"）。特定できない場合は None。
    """
    def __init__(self, field: Optional[str], detail: str = ""):
        super().__init__(
            f"Unique constraint violated on {field or 'unknown field'}: {detail}".rstrip(": "),
            "STORE_CONFLICT",
        )
        self.field = field


class StoreUnavailableError(UserStoreError):
    """データベースに接続できない、またはタイムアウトした場合の例外"""
    def __init__(self, detail: str):
        super().__init__(f"User store unavailable: {detail}", "STORE_UNAVAILABLE")
