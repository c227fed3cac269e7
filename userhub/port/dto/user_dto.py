from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CreateUserDTO:
    """
    ユーザー登録用DTO

    password はハッシュ化済みの値を渡すこと。
    """
    uuid: str
    name: str
    email: str
    password: str
    tag_name: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    number_of_publications: int = 0
    publications: List[str] = field(default_factory=list)


@dataclass
class UserRecordDTO:
    """
    永続化層とやり取りするユーザーレコード

    値オブジェクトを含まないプレーンなスカラー値のみを持つ。
    """
    uuid: str
    name: str
    email: str
    password: str
    tag_name: str
    bio: Optional[str]
    profile_image: Optional[str]
    number_of_publications: int
    publications: Optional[List[str]]
