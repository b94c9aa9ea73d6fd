import io
import random
import threading

from prodband.console import (
    GRAVESTONE,
    NOISE_WIDTH,
    ConsoleEngine,
    player_label,
    player_title,
)
from prodband.game import Game
from prodband.leaderboard import ScoreEntry
from prodband.players import (
    Dwarf,
    ImmortalPlayer,
    NamelessPlayer,
    ProductManager,
    VibeCoder,
)


def feeder(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


def make_engine(lines):
    out = io.StringIO()
    return ConsoleEngine(feeder(lines), out), out


def test_player_label_prefers_ascii_art():
    pm = ProductManager()
    assert player_label(pm, 0) == pm.ascii_art()


def test_player_label_uses_str_then_name_then_default():
    dwarf = Dwarf("Gimli", pickaxe_durability=3)
    assert player_label(dwarf, 0) == str(dwarf)
    assert player_label(VibeCoder("R. Stallman"), 0) == "R. Stallman"
    assert player_label(NamelessPlayer(), 2) == "Player#3"


def test_player_title():
    assert player_title(ProductManager(), 0) == "It's Sir Tan Lee Knot's turn"
    assert player_title(NamelessPlayer(), 0) == "It's Player#1's turn"


def test_render_players_marks_dead_and_current():
    engine, _ = make_engine([])
    players = [NamelessPlayer(is_dead=True), VibeCoder("Ada")]
    text = engine.render_players("Band", players, 1)
    assert text.startswith("[ Band ]")
    assert GRAVESTONE.splitlines()[1] in text
    assert "> It's Player#2's turn" in text or "> " + player_title(players[1], 1) in text


def test_select_action_by_number():
    engine, out = make_engine(["2"])
    chosen = []
    engine.select_action(Game(), Dwarf("Gimli", pickaxe_durability=3), chosen.append)
    assert [a.description for a in chosen] == ["Mine for gold"]
    assert "1. Dig a tunnel" in out.getvalue()


def test_select_action_empty_answer_picks_first():
    engine, _ = make_engine([""])
    chosen = []
    engine.select_action(Game(), Dwarf("Gimli", pickaxe_durability=3), chosen.append)
    assert chosen[0].description == "Dig a tunnel"


def test_select_action_reprompts_on_invalid_answer():
    engine, out = make_engine(["9", "x", "1"])
    chosen = []
    engine.select_action(Game(), Dwarf("Gimli", pickaxe_durability=3), chosen.append)
    assert chosen[0].description == "Dig a tunnel"
    assert out.getvalue().count("Please choose a move between 1 and 2") == 2


def test_select_action_without_actions_gives_fallback():
    engine, _ = make_engine([""])
    chosen = []
    engine.select_action(Game(), ImmortalPlayer(), chosen.append)
    assert chosen[0].description == "What are we even doing?"
    assert chosen[0].selected(Game()) == "So sad to have no actions against PRODUCTION."


def test_end_of_input_stops_once():
    engine, _ = make_engine([])
    exits = []
    engine.with_on_exit(lambda: exits.append(True))
    chosen = []
    engine.select_action(Game(), VibeCoder("V"), chosen.append)
    engine.stop()
    assert chosen == []
    assert exits == [True]
    assert engine.stopped


def test_render_outcome_calls_back():
    engine, out = make_engine([""])
    called = []
    engine.render_outcome("Wages paid", lambda: called.append(True))
    assert called == [True]
    assert "Wages paid" in out.getvalue()


def test_welcome_lists_leaderboard_and_uses_default_name():
    engine, out = make_engine(["", ""])
    names = []
    engine.welcome([ScoreEntry("Alpha", 10), ScoreEntry("Beta", 7)], names.append)
    assert names == ["Vibe Coders"]
    text = out.getvalue()
    assert "1. Alpha - 10" in text
    assert "2. Beta - 7" in text


def test_welcome_with_given_name():
    engine, out = make_engine(["Rockers", ""])
    names = []
    engine.welcome([], names.append)
    assert names == ["Rockers"]
    assert "Hello, Rockers! Are you ready?" in out.getvalue()


def test_pizza_delivery_runs_callback_on_next_prompt():
    engine, out = make_engine([""])
    fed = []
    thread = threading.Thread(target=engine.pizza_delivery, args=(lambda: fed.append(1),))
    thread.start()
    thread.join()
    assert fed == []
    engine.render_outcome("Delivered outcome", lambda: None)
    assert fed == [1]
    assert "Delivered outcome" in out.getvalue()


def test_render_prod_scrambles_a_little():
    engine, _ = make_engine([])
    engine.rng = random.Random(1)
    title, noise = engine.render_prod().split("\n")
    assert title == "PRODUCTION is `Calm`"
    assert len(noise) == NOISE_WIDTH
    assert all(c == "A" or 48 <= ord(c) < 128 for c in noise)
    assert sum(c != "A" for c in noise) <= 10


def test_render_game_shows_inventory():
    engine, out = make_engine([])
    game = Game(players=[VibeCoder("V")], score=3, coins=7, band_name="Band")
    engine.render_game(game)
    text = out.getvalue()
    assert "Score: 3" in text
    assert "Coins: 7" in text
    assert "[ Band ]" in text


def test_game_over_when_everyone_dead():
    engine, out = make_engine([""])
    exits = []
    engine.with_on_exit(lambda: exits.append(True))
    Game(players=[NamelessPlayer(is_dead=True)]).main_loop(engine)
    assert exits == [True]
    assert "Oh well..." in out.getvalue()


def test_turns_are_played_until_input_ends():
    engine, out = make_engine(["1", ""])
    game = Game(players=[VibeCoder("V")], coins=5)
    game.main_loop(engine)
    assert game.score == 5
    assert "You did nothing => +5 Score" in out.getvalue()
    assert engine.stopped