"""
Unit tests for the in-memory session store.
"""

import pytest

from hanuman.models import Message
from hanuman.storage import InMemorySessionStore, SessionStore


def _conversation():
    return [Message.system("sys"), Message.user("hello"), Message.assistant("hi")]


class TestInMemorySessionStore:
    """Tests for InMemorySessionStore."""

    def test_implements_interface(self, store):
        assert isinstance(store, SessionStore)

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            InMemorySessionStore(ttl_seconds=0)

    @pytest.mark.asyncio
    async def test_load_missing_returns_none(self, store):
        assert await store.load("unknown") is None

    @pytest.mark.asyncio
    async def test_save_then_load_before_ttl(self, store, clock):
        conversation = _conversation()
        await store.save("t", conversation)
        clock.advance(59)

        assert await store.load("t") == conversation

    @pytest.mark.asyncio
    async def test_load_after_ttl_returns_none(self, store, clock):
        await store.save("t", _conversation())
        clock.advance(60)

        assert await store.load("t") is None
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_save_resets_expiry(self, store, clock):
        await store.save("t", _conversation())
        clock.advance(50)
        await store.save("t", _conversation())
        clock.advance(50)

        assert await store.load("t") is not None

    @pytest.mark.asyncio
    async def test_load_does_not_extend_expiry(self, store, clock):
        await store.save("t", _conversation())
        clock.advance(50)
        await store.load("t")
        clock.advance(15)

        assert await store.load("t") is None

    @pytest.mark.asyncio
    async def test_save_replaces_entry(self, store):
        await store.save("t", _conversation())
        await store.save("t", [Message.system("other")])

        loaded = await store.load("t")
        assert [m.content for m in loaded] == ["other"]

    @pytest.mark.asyncio
    async def test_loaded_list_is_a_copy(self, store):
        await store.save("t", _conversation())

        loaded = await store.load("t")
        loaded.append(Message.user("mutated"))

        assert len(await store.load("t")) == 3

    @pytest.mark.asyncio
    async def test_saved_list_is_a_copy(self, store):
        conversation = _conversation()
        await store.save("t", conversation)
        conversation.append(Message.user("later"))

        assert len(await store.load("t")) == 3

    @pytest.mark.asyncio
    async def test_purge_expired(self, store, clock):
        await store.save("old", _conversation())
        clock.advance(30)
        await store.save("fresh", _conversation())
        clock.advance(40)

        removed = await store.purge_expired()

        assert removed == 1
        assert await store.load("old") is None
        assert await store.load("fresh") is not None
