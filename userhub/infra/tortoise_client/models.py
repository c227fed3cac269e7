"""
Tortoise ORM models for the user service
"""
from tortoise.models import Model
from tortoise import fields


class User(Model):
    id = fields.IntField(pk=True)
    uuid = fields.CharField(max_length=255, unique=True)
    name = fields.CharField(max_length=100)
    email = fields.CharField(max_length=255, unique=True)
    password = fields.CharField(max_length=255)
    tag_name = fields.CharField(max_length=30, unique=True, source_field="tagName")
    bio = fields.TextField(null=True)
    profile_image = fields.CharField(max_length=2048, null=True, source_field="profileImage")
    number_of_publications = fields.IntField(default=0, source_field="numberOfPublications")
    publications = fields.JSONField(default=list)  # list of publication references
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user"
