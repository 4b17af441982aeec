# splendor

Building blocks for a Splendor board game: gem tokens, noble and
expansion cards read from an XML card database, decks, players, a
packet format and TCP link for two-player online games, mouse
colliders, buttons and card widgets that track their own state, screen
layout helpers, a sound system and a plain-text logger.

## Installing

The package needs Python 3.10 or later. It depends on `pygame`, which
is used only when the sound system opens real audio files. The `test`
extra adds `pytest`.

## Setup rules

```python
from splendor.pieces import gem_tokens_per_pile, noble_card_count

gem_tokens_per_pile(2)   # 4 tokens in each gem pile
gem_tokens_per_pile(3)   # 5
gem_tokens_per_pile(4)   # 7
noble_card_count(3)      # 4: one more noble than players
```

`splendor.pieces` also holds the fixed piece counts and
`WINNING_PRESTIGE_POINTS` (15). `splendor.pregame.PregameSetup` bundles
a player count, a `GameMode` (`OFFLINE`, `CLIENT`, `SERVER`) and timer
and AI flags; it raises `ValueError` for a player count outside 2 to 4
and offers `gem_token_count()` and `noble_card_count()`.

## Tokens

`splendor.tokens.GemType` lists the five gems and gold.
`GemType.from_code("GE")` maps a database code to a gem (and raises
`ValueError` for an unknown code), `GemType.gems()` returns the five
gems without gold, and `.code` gives the code back.

## Cards and decks

Card specifications come from an XML document with a `NOBLE_CARDS`
section and an `EXPANSION_CARDS` section holding `LEVEL1` to `LEVEL3`:

```python
from splendor.carddao import CardDatabase
from splendor.deck import noble_deck, expansion_deck
from splendor.randomizer import Randomizer

database = CardDatabase.load("CardsDatabase.xml")
nobles = noble_deck(database)
nobles.shuffle(Randomizer(42))
top = nobles.draw()
print(top.name, top.prestige_points, len(nobles))

level2 = expansion_deck(database, 2)
```

`CardDatabase.from_xml(text)` parses from a string. A malformed
document raises `CardDatabaseError`. `database.noble(id)` and
`database.expansion(level, id)` return an empty specification for an
id they do not hold; `expansion` raises `ValueError` for a level other
than 1 to 3.

`splendor.cards` has `ExpansionCard` and `NobleCard`, each built with
`from_database(...)`. A `Deck` draws from the top; `draw()` and
`remove_top()` on an empty deck raise `EmptyDeckError`. Decks also
offer `add`, `is_empty`, `cards`, `replace_cards` and `clear`.

## Players and sessions

`splendor.player.Player` keeps an id, a name, a `PlayerType` and
prestige points. `splendor.sessions` seats players
(`offline_players`, `online_players`), passes the turn
(`next_player_index`), finds the first player at 15 prestige or more
(`find_winner`), formats `winner_message(name)`, and `open_log(path)`
is a context manager that appends to a log file through a `Logger`
keeping info and above.

## Networking

`splendor.packet.NetworkPacket` carries hand, board, deck and player
data as strings. `to_bytes()` writes each field as a 32-bit big-endian
length and UTF-8 text; `NetworkPacket.from_bytes(...)` reads it back
and raises `ValueError` on truncated or trailing data. `str(packet)`
prints a readable report.

`splendor.network.Network(ip, port)` (default `127.0.0.1`, port 52000)
is one peer: `start_server()` and `accept_connection()` on the host,
`connect()` on the joining side, then `send(packet)` (which clears the
packet) and `receive()`. Use it as a context manager so its sockets
are closed.

## Interface pieces

- `splendor.colliders`: `RectCollider` and `CircCollider` turn
  `MouseEvent`s into enter, leave, over, click and release hooks.
- `splendor.button.UIButton`: a rectangular button moving between
  `ButtonState`s, with a `Design` per state (`default_designs()`).
- `splendor.uicard.UICard`: a card slot that can be hovered, bought
  (left click) or held (right click); `texture_path` names its image.
- `splendor.cardsrow.CardsRowPanel`: a row of evenly spaced card slots,
  able to report a picked card or a noble the player has earned.
- `splendor.resources_panel.ResourcesPanel`: placement and labels for
  five gem counts.
- `splendor.game_layout.game_layout(width, height)`: the rectangle of
  every panel of the game table, plus the `GameEvent` enum.
- `splendor.sound.SoundSystem`: music and effects loaded from numbered
  files (`m_<n>.ogg`, `s_<n>.wav`), with volumes clamped to 0–100.
  Factories can be passed in to replace the pygame players.

## Logging

```python
import sys
from splendor.logger import Logger, Level

logger = Logger(sys.stdout, Level.INFO)
logger.log("Application started", Level.INFO)
```

Each line reads `[Info][<local time>]message`; messages below the
minimum level are dropped.

## What the package does not do

It has no command to run and opens no window: there is no game loop,
no drawing, no menus, and no board or hand state that applies a full
turn. The widgets keep their state for a program that draws them.