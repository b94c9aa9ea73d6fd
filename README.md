# prodband

A small turn-based terminal game: a band of developers attempts to survive
against PRODUCTION. Each turn one player picks an action: digging tunnels,
mining gold, adding features, asking a chatbot, paying wages or ordering
pizza. The band's score, coins and PRODUCTION's mood change with every move.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
prodband
prodband --scores path/to/scores.csv
```

The game shows the top 10 of the leaderboard and asks for your band's name
(pressing Enter keeps the default, "Vibe Coders"). Then the players take
turns, each choosing from a numbered menu of actions; an empty answer picks
the first action. After every move the outcome is shown and confirmed with
Enter.

The band wins when it holds more than 100 coins. It loses when every player
other than the minion is dead or fired. When the game ends, or input runs out
(Ctrl-D), the band's name and score are appended to the leaderboard file. By
default that file is `allscores.csv` in the current directory; `--scores`
chooses another one.

The players:

- **ProductManager**: pays wages or orders pizza. An ordered pizza arrives
  after a random delay of up to 19 seconds, adds one pizza per living player
  and heals every player that can be healed.
- **Dwarf**: digs tunnels (raising the chance of finding gold) and mines for
  gold until the pickaxe breaks.
- **NamelessPlayer**: does nothing and may die doing it.
- **Minion**: immortal; eats bananas for skill and adds features, which may
  turn out to be bugs.
- **VibeCoder**: does nothing or asks a chatbot, and is fired when its
  contribution drops too low or it costs more coins than the band has.

PRODUCTION moves through the states Calm, Annoyed, Enraged and Legacy
(`prodband.production.ProductionState`) as it reacts to the band's moves.

## Library pieces

- `prodband.game`: `Game`, `new_game`, `all_players_dead` and the `Engine`
  protocol that any front end implements.
- `prodband.console`: `ConsoleEngine`, the line-oriented front end, plus
  `player_label` and `player_title`.
- `prodband.maybe`: a `Maybe` value with `none()`, `this(value)` and
  `when(check)`, chained with `then`, `only_if`, `or_` and `or_else`.
- `prodband.binheap`: a binary min-heap `Heap` over items that compare with `<`.
- `prodband.leaderboard`: `ScoreEntry`, `get_all`, `get_top` and `persist`
  for the CSV leaderboard.
- `prodband.concurrency`: `run`, `consume_channel`, `handle_concurrently`
  (one daemon thread per item) and `serve` (one thread per accepted
  connection, waiting for all of them when accepting fails).
- `prodband.fp`: lazy values (`LazyValue`, `new_accumulator`), `fmap`, `ap`,
  `pipe` and a chainable `Task`. Run a short demonstration with:

```
prodband-fp
```

## What it does not do

The game is played as plain lines of text: there is no full-screen or
mouse-driven interface, no colours and no animated PRODUCTION panel beyond a
line of scrambled characters printed each turn.