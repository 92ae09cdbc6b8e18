from responder.config import HistoryConfig
from responder.memory.conversation import ConversationHistory


def make_history(capacity: int = 5, max_message_length: int = 256) -> ConversationHistory:
    return ConversationHistory(HistoryConfig(capacity=capacity, max_message_length=max_message_length))


def test_append_until_full_sets_flag():
    history = make_history(capacity=3)
    history.append("user", "one")
    history.append("assistant", "two")
    assert history.count == 2
    assert not history.is_full

    history.append("user", "three")
    assert history.count == 3
    assert history.is_full


def test_overflow_evicts_oldest_and_keeps_order():
    capacity = 50
    history = make_history(capacity=capacity)
    for index in range(capacity + 1):
        history.append("user", f"message {index}")

    assert history.count == capacity
    assert history.is_full
    texts = [message.text for message in history]
    assert len(texts) == capacity
    assert "message 0" not in texts
    assert texts == [f"message {index}" for index in range(1, capacity + 1)]


def test_iteration_is_restartable():
    history = make_history(capacity=3)
    for text in ("a", "b", "c", "d"):
        history.append("user", text)

    first = [message.text for message in history]
    second = [message.text for message in history]
    assert first == second == ["b", "c", "d"]


def test_append_truncates_long_text():
    history = make_history(max_message_length=10)
    message = history.append("user", "x" * 40)
    assert message.text == "x" * 10
    assert history.messages()[0].text == "x" * 10


def test_last_user_message_scans_newest_first():
    history = make_history(capacity=4)
    assert history.last_user_message() is None

    history.append("user", "first question")
    history.append("assistant", "first answer")
    history.append("user", "second question")
    history.append("assistant", "second answer")
    assert history.last_user_message() == "second question"

    # wrap around so the newest user message sits before head
    history.append("assistant", "extra")
    history.append("assistant", "extra again")
    assert history.last_user_message() == "second question"


def test_last_user_message_none_when_only_assistant():
    history = make_history()
    history.append("assistant", "Welcome!")
    assert history.last_user_message() is None


def test_clear_resets_state():
    history = make_history(capacity=2)
    history.append("user", "a")
    history.append("user", "b")
    history.append("user", "c")
    history.clear()

    assert len(history) == 0
    assert not history.is_full
    assert history.head == 0
    assert list(history) == []
