import pytest

from responder.config import MarkovConfig
from responder.engines.markov import (
    EMPTY_CHAIN_RESPONSE,
    Follower,
    MarkovEngine,
    MarkovState,
    tokenize_training_text,
)

TWO_SENTENCES = "The cat sat on the mat. The dog sat on the rug."
CYCLE = "one two three one two three one two three"


def make_engine(seed_text=(), seed=42, **settings) -> MarkovEngine:
    engine = MarkovEngine(MarkovConfig(**settings), seed_text=seed_text, seed=seed)
    engine.initialize()
    return engine


def test_tokenize_keeps_only_terminal_punctuation():
    tokens = tokenize_training_text("Hello, world! How are you? Fine; thanks.")
    assert tokens == ["Hello", "world!", "How", "are", "you?", "Fine", "thanks."]


def test_training_twice_increases_frequency_without_duplicate_keys():
    engine = make_engine()
    engine.train(TWO_SENTENCES)
    keys_after_first = [state.key for state in engine.chain]
    assert len(keys_after_first) == 9
    assert len(set(keys_after_first)) == len(keys_after_first)

    engine.train(TWO_SENTENCES)
    keys_after_second = [state.key for state in engine.chain]
    assert keys_after_second == keys_after_first

    sat_on = engine.chain.find("sat on")
    assert [(f.word, f.frequency) for f in sat_on.followers] == [("the", 4)]
    on_the = engine.chain.find("on the")
    assert {f.word: f.frequency for f in on_the.followers} == {"mat.": 2, "rug.": 2}


def test_sentence_start_flags():
    engine = make_engine()
    engine.train(TWO_SENTENCES)
    assert engine.chain.find("The cat").is_sentence_start
    assert engine.chain.find("The dog").is_sentence_start
    assert not engine.chain.find("cat sat").is_sentence_start
    assert not engine.chain.find("mat. The").is_sentence_start


def test_final_window_is_stored_without_followers():
    engine = make_engine()
    engine.train(TWO_SENTENCES)
    state = engine.chain.find("the rug.")
    assert state is not None
    assert state.followers == []
    assert engine.chain.find("the mat.").followers[0].word == "The"


def test_two_word_message_is_learned_and_generated():
    engine = make_engine()
    engine.train("Printer broken.")
    assert [state.key for state in engine.chain] == ["Printer broken."]
    assert engine.chain.find("Printer broken.").is_sentence_start

    response = engine.generate("printer")
    assert response != EMPTY_CHAIN_RESPONSE
    assert response.startswith("Printer broken.")
    assert set(response.split()) == {"Printer", "broken."}


def test_chain_never_exceeds_capacity():
    engine = make_engine(max_states=16)
    engine.train(" ".join(f"word{index}" for index in range(200)))
    assert len(engine.chain) == 16

    engine.train("completely new words that have no room left at all")
    assert len(engine.chain) == 16


def test_follower_list_only_evicts_single_occurrences():
    state = MarkovState(key="a b")
    limits = {"max_followers": 2, "max_frequency": 255}
    assert state.add_follower("x", **limits)
    assert state.add_follower("y", **limits)
    assert state.add_follower("y", **limits)

    assert state.add_follower("z", **limits)
    assert [(f.word, f.frequency) for f in state.followers] == [("z", 1), ("y", 2)]

    assert state.add_follower("z", **limits)
    assert not state.add_follower("w", **limits)
    assert [f.word for f in state.followers] == ["z", "y"]


def test_follower_frequency_saturates():
    state = MarkovState(key="a b")
    for _ in range(10):
        state.add_follower("x", max_followers=8, max_frequency=3)
    assert state.followers[0].frequency == 3


def test_weighted_draw_follows_frequencies():
    engine = make_engine(seed=2024)
    state = MarkovState(key="a b", followers=[Follower("first", 3), Follower("second", 1)])
    trials = 10_000
    hits = sum(engine.choose_follower(state) == "first" for _ in range(trials))
    assert hits / trials == pytest.approx(0.75, abs=0.03)


@pytest.mark.parametrize("seed", [1, 2, 3, 17, 99, 12345])
@pytest.mark.parametrize(
    "message",
    [None, "", "hi", "Tell me about the finder", "my printer is broken", "zzzz qqqq"],
)
def test_generate_always_ends_with_terminal_punctuation(seed, message):
    engine = MarkovEngine(seed=seed)
    engine.initialize()
    response = engine.generate(message)
    assert response
    assert response[-1] in ".!?"
    assert len(response) <= engine.settings.max_response_length


def test_generate_with_empty_chain_returns_fallback():
    engine = make_engine()
    assert engine.generate("anything at all") == EMPTY_CHAIN_RESPONSE


def test_topic_keyword_picks_first_sentence_start_state():
    engine = MarkovEngine(seed=1)
    engine.initialize()
    state = engine.choose_start("Tell me about the finder please")
    assert state.key == "The Finder"
    assert state.is_sentence_start


def test_relevance_scoring_prefers_sentence_starts():
    engine = make_engine(seed_text=("Alpha beta gamma delta. Zebra crossing ahead now.",))
    state = engine.choose_start("where is the zebra")
    assert state.key == "Zebra crossing"


def test_relevance_scoring_rewards_states_with_many_followers():
    engine = make_engine(
        seed_text=("A red blue car. Go see blue sky. Go see blue sea. Go see blue hat.",)
    )
    assert len(engine.chain.find("see blue").followers) == 3
    assert len(engine.chain.find("red blue").followers) == 1
    state = engine.choose_start("blue")
    assert state.key == "see blue"


def test_topic_keyword_wins_over_relevance_scoring():
    engine = make_engine(seed_text=("Printer paper jams. Zebra crossing ahead now.",))
    state = engine.choose_start("zebra printer")
    assert state.key == "Printer paper"


def test_topic_without_sentence_start_falls_through_to_relevance():
    engine = make_engine(seed_text=("Check the printer daily. Zebra crossing ahead now.",))
    assert not engine.chain.find("the printer").is_sentence_start
    state = engine.choose_start("printer zebra")
    assert state.key == "Zebra crossing"


def test_short_message_falls_back_to_random_start():
    engine = make_engine(seed_text=(TWO_SENTENCES,))
    state = engine.choose_start("hi")
    assert engine.chain.find(state.key) is state


def test_runaway_sentences_are_broken_up():
    engine = make_engine(seed_text=(CYCLE,), max_words_per_sentence=5)
    for _ in range(20):
        response = engine.generate()
        assert response.endswith(".")
        assert len(response.split()) <= 12


def test_response_length_budget():
    engine = make_engine(seed_text=(CYCLE,), max_words_per_sentence=100, max_response_length=40)
    response = engine.generate()
    assert len(response) <= 40
    assert response.endswith(".")


def test_same_seed_reproduces_output():
    first = MarkovEngine(seed=321)
    second = MarkovEngine(seed=321)
    first.initialize()
    second.initialize()
    assert [first.generate("memory") for _ in range(3)] == [second.generate("memory") for _ in range(3)]


def test_observed_user_messages_are_learned():
    engine = make_engine()
    engine.observe_user_message("My printer jams every single morning.")
    assert engine.chain.find("My printer").is_sentence_start
    assert engine.chain.find("jams every") is not None


def test_initialize_rebuilds_chain_from_scratch():
    engine = make_engine(seed_text=(TWO_SENTENCES,))
    engine.train("Extra words that were not in the seed text.")
    engine.initialize()
    assert len(engine.chain) == 9
    engine.dispose()
    assert len(engine.chain) == 0
