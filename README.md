# gameboy

Three small games behind one menu window:

- **Hangman**: guess the hidden word letter by letter. Its category is shown as a hint. After six wrong guesses you are hanged.
- **Snake**: steer the snake with the arrow keys. An apple is worth 10 points and an easter egg 30. You have three lives.
- **Wordle**: guess the five-letter word in six tries. A green square is a letter in the right place. A yellow square is a letter that belongs somewhere else in the word.

The main menu also has an instructions screen. It also has a leaderboard that ranks every player by their best score and puts a crown next to the top three.

## Installing

```
pip install .
```

This installs `pygame`, which draws the windows and plays the sounds.

## Playing

```
gameboy
```

Run the command from the directory that holds the game's images, fonts and sound files. These include `nintendo.jpg`, `namer.jpg`, `gamer3.jpg`, `Arial.ttf`, `TNR.ttf`, `arial.ttf`, the `man*.png` images and the music files. What happens when one is missing depends on the file:

- A missing background image or font makes that game or screen return to the menu at once.
- A missing sound file just stays silent.
- Snake also returns at once when `gameover.wav` cannot be loaded.

Options:

- `--scores PATH`: the score table to use. The default is `scores.txt`.

The program first asks for your name. Type it and press Enter; the name is written to `player.txt`. The main menu then opens.

Controls:

- **Up** and **Down** move through the menu, and **Enter** picks an entry.
- In a game, **Esc** pauses and resumes, and **Backspace** returns to the main menu.
- When a round is over, **Enter** starts a new one. In Snake, Enter starts you again after a crash while you have lives left.

The games of one session share a single running score. After each game, that score is printed to the terminal. It is also written to the score table for your name, but only if it beats the score already recorded for you. The score table holds one `name score` pair per line.

## Using the pieces from Python

The game rules work without opening a window:

```python
from gameboy.hangman import HangmanRound
from gameboy.wordle import WordleRound, score_guess
from gameboy.snake import Snake, Direction
from gameboy.scores import ScoreKeeper, save_score, highest_score, leaderboard

round_ = HangmanRound("apple", "Fruits")
round_.guess("p")          # True
print(round_.masked)       # _pp__

print(score_guess("plane", "apple"))

keeper = ScoreKeeper(0)
snake = Snake(keeper, 20)
snake.direction = Direction.DOWN
snake.tick()
print(snake.head)          # (5, 8)

keeper.increase()          # +10
keeper.add_bonus()         # +30
save_score("scores.txt", "alice", keeper.value)
print(highest_score("scores.txt", "alice"))
for entry in leaderboard("scores.txt"):
    print(entry.name, entry.score)
```

Module overview:

- `gameboy.scores`
  - `ScoreKeeper`: the running session score.
  - `ScoreEntry`: one line of the score table.
  - `read_scores`, `highest_score`, `save_score` and `leaderboard`: read and write the score table, which holds at most 100 players.
- `gameboy.player`
  - `Player`: a name and a score, with `save` and `Player.load` for `player.txt`.
- `gameboy.hangman`
  - `HangmanRound`: the rules of one round.
  - `random_entry`: picks a word and its category.
  - `Hangman`: the game window.
- `gameboy.snake`
  - `Snake`, `Food`, `EasterEgg` and `Direction`: the board logic.
  - `SnakeGame`: the game window.
- `gameboy.wordle`
  - `score_guess`, `WordleRound`, `LetterState` and `random_word`: the rules.
  - `Wordle`: the game window.
- `gameboy.menu`
  - `Menu`: the menu options and the current selection.
  - `show_instructions` and `show_leaderboard`: the two extra screens.
- `gameboy.sound`
  - `SoundTrack`: a sound played once or in a loop.
- `gameboy.app`
  - `GameBoy`: the main console.
  - `main`: the `gameboy` command.

## Running the tests

```
pip install ".[test]"
pytest
```