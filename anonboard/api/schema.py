from marshmallow import Schema, fields, validate, ValidationError, EXCLUDE

from anonboard.constants import DATETIME_MS_FORMAT, OBJECT_ID_PATTERN


def validate_not_blank(text):
    if not text.strip():
        raise ValidationError("Must not be blank.")


object_id = validate.Regexp(OBJECT_ID_PATTERN, error="Not a valid id: {input}")


class DefaultError(Schema):
    code = fields.Integer()
    status = fields.String()
    message = fields.String()
    errors = fields.Dict()


class DefaultSchema(Schema):
    class Meta:
        unknown = EXCLUDE
        datetimeformat = DATETIME_MS_FORMAT


class Reply(DefaultSchema):
    _id = fields.String(required=True, metadata={"example": "6716f0c2a3b4c5d6e7f80912"})
    text = fields.String(required=True)
    created_on = fields.String(required=True, metadata={"example": "2025-06-07T02:29:07.980084Z", "format": "datetime"})


class Thread(DefaultSchema):
    _id = fields.String(required=True, metadata={"example": "6716f0c2a3b4c5d6e7f80911"})
    text = fields.String(required=True)
    created_on = fields.String(required=True, metadata={"example": "2025-06-07T02:29:07.980084Z", "format": "datetime"})
    bumped_on = fields.String(required=True, metadata={"example": "2025-06-07T02:29:07.980084Z", "format": "datetime"})
    replies = fields.List(fields.Nested(Reply), required=True)


class BoardThread(Thread):
    replycount = fields.Integer(required=True, metadata={"description": "Total number of replies in the thread"})


class CreateThreadRequest(DefaultSchema):
    text = fields.String(required=True, validate=validate_not_blank)
    delete_password = fields.String(required=True, validate=validate.Length(min=1))


class ReportThreadRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)


class DeleteThreadRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)
    delete_password = fields.String(required=True, validate=validate.Length(min=1))


class GetThreadRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)


class CreateReplyRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)
    text = fields.String(required=True, validate=validate_not_blank)
    delete_password = fields.String(required=True, validate=validate.Length(min=1))


class ReportReplyRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)
    reply_id = fields.String(required=True, validate=object_id)


class DeleteReplyRequest(DefaultSchema):
    thread_id = fields.String(required=True, validate=object_id)
    reply_id = fields.String(required=True, validate=object_id)
    delete_password = fields.String(required=True, validate=validate.Length(min=1))
