import random

import discord

from rooivalk.catalogue import ResponseCatalogue
from rooivalk.formatter import build_reply, extract_images

CATALOGUE = ResponseCatalogue(errors=("err",), greetings=("hi",), discord_limit=("too long!",))


def test_short_reply_passes_through():
    reply = build_reply("hello there", [11], catalogue=CATALOGUE)

    assert reply.content == "hello there"
    assert reply.file is None
    assert reply.embeds == []
    assert reply.allowed_mentions == [11]


def test_long_reply_becomes_markdown_attachment():
    body = "x" * 2100
    reply = build_reply(body, catalogue=CATALOGUE, rng=random.Random(1))

    assert reply.content == "too long!"
    assert reply.file is not None
    assert reply.file.name == "rooivalk.md"
    assert reply.file.data.decode("utf-8") == body


def test_body_exactly_at_limit_is_inline():
    body = "y" * 2000
    reply = build_reply(body, catalogue=CATALOGUE)
    assert reply.content == body
    assert reply.file is None


def test_images_become_embeds():
    text = "Look ![cat](https://img.example/cat.PNG?size=2) and ![dog](https://img.example/dog.jpg)"
    reply = build_reply(text, catalogue=CATALOGUE)

    assert reply.content == "Look  and"
    assert [embed.url for embed in reply.embeds] == [
        "https://img.example/cat.PNG?size=2",
        "https://img.example/dog.jpg",
    ]


def test_non_image_links_are_left_alone():
    text = "![doc](https://example.com/file.pdf)"
    stripped, urls = extract_images(text)
    assert stripped == text
    assert urls == []


def test_image_only_reply_has_empty_content():
    reply = build_reply("![x](https://a.b/c.webp)", catalogue=CATALOGUE)
    assert reply.content == ""
    assert len(reply.embeds) == 1


def test_message_kwargs_restrict_mentions():
    reply = build_reply("hi <@11> <@12>", [11], catalogue=CATALOGUE)
    kwargs = reply.to_message_kwargs()

    mentions = kwargs["allowed_mentions"]
    assert isinstance(mentions, discord.AllowedMentions)
    assert mentions.everyone is False
    assert mentions.roles is False
    assert [user.id for user in mentions.users] == [11]
    assert "files" not in kwargs
    assert "embeds" not in kwargs


def test_edit_kwargs_use_attachments():
    reply = build_reply("z" * 2500, catalogue=CATALOGUE)
    kwargs = reply.to_edit_kwargs()

    assert "files" not in kwargs
    assert len(kwargs["attachments"]) == 1
    assert kwargs["attachments"][0].filename == "rooivalk.md"
