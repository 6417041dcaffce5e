from dataclasses import dataclass
from enum import Enum
from typing import Union

from aiogram.types import Message


class MediaKind(str, Enum):
    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"
    AUDIO = "audio"
    VOICE = "voice"
    VIDEO_NOTE = "video_note"


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Media:
    kind: MediaKind
    file_id: str
    caption: str | None = None


Content = Union[Text, Media]

# MediaKind -> (Bot method, argument name)
_SENDERS = {
    MediaKind.PHOTO: ("send_photo", "photo"),
    MediaKind.VIDEO: ("send_video", "video"),
    MediaKind.DOCUMENT: ("send_document", "document"),
    MediaKind.AUDIO: ("send_audio", "audio"),
    MediaKind.VOICE: ("send_voice", "voice"),
    MediaKind.VIDEO_NOTE: ("send_video_note", "video_note"),
}


def content_from_message(message: Message) -> Content | None:
    """
    Turn an incoming message into a Text / Media value.
    Returns None for payloads the bot does not relay (stickers, contacts, ...).
    """
    if message.text is not None:
        return Text(message.text)

    caption = message.caption
    if message.photo:
        # Telegram sends several sizes, the last one is the largest
        return Media(MediaKind.PHOTO, message.photo[-1].file_id, caption)
    if message.video:
        return Media(MediaKind.VIDEO, message.video.file_id, caption)
    if message.document:
        return Media(MediaKind.DOCUMENT, message.document.file_id, caption)
    if message.audio:
        return Media(MediaKind.AUDIO, message.audio.file_id, caption)
    if message.voice:
        return Media(MediaKind.VOICE, message.voice.file_id, caption)
    if message.video_note:
        return Media(MediaKind.VIDEO_NOTE, message.video_note.file_id)
    return None


async def send_content(bot, chat_id: int, content: Content, caption: str | None = None, reply_markup=None):
    if isinstance(content, Text):
        text = f"{caption}: {content.text}" if caption else content.text
        return await bot.send_message(chat_id=chat_id, text=text, reply_markup=reply_markup)

    method, field = _SENDERS[content.kind]
    caption = caption or content.caption

    if content.kind is MediaKind.VIDEO_NOTE:
        # video note has no caption in Bot API
        sent = await bot.send_video_note(
            chat_id=chat_id,
            video_note=content.file_id,
            reply_markup=None if caption else reply_markup,
        )
        if caption:
            await bot.send_message(chat_id=chat_id, text=caption, reply_markup=reply_markup)
        return sent

    return await getattr(bot, method)(
        chat_id=chat_id,
        **{field: content.file_id},
        caption=caption,
        reply_markup=reply_markup,
    )
