# gamebox

A small collection of 2D games played in a pygame window. It currently
has one game: a Flappy Bird clone.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
gamebox
```

You are asked which game to play. Enter `1` for Flappy Bird. An entry of
`0`, or anything that is not a whole number, asks again; any other number,
or the end of input, ends the program with exit status `-1`.

In Flappy Bird:

- Press **Space** to start the game.
- Press **Space** again to flap. The bird can only jump once it is no
  longer rising, so holding or spamming the key does not stack jumps.
- After a second of play the pipes start sliding in from the right, and a
  pair that leaves the screen on the left comes back on the right with a
  new random gap. Touching any pipe ends the run.
- Close the window to quit.

Debug messages are printed to the terminal in colour as the game runs.

## Image files

The game images are not included. `FlappyBird` loads
`background-day.png`, `pipe-green.png` and `Bird.png` from the `images`
directory next to `gamebox/flappy_bird.py`. Put the files there, or point
`FlappyBird.assets_dir` at another directory before calling
`create_window()`. A missing or unreadable file raises
`gamebox.sprite.ImageLoadError`.

## Using the pieces

The package can also serve as a tiny framework for other games:

- `gamebox.game.Game` owns the window, the list of sprites it draws, the main
  loop and key handling. Subclass it, pass the window size and title to
  `Game.__init__`, and implement `on_screen_created`, `update(dt)`,
  `on_input_detected(key)` and `on_game_close`; then call `create_window()`
  followed by `start_loop()`. `create_image(path)` loads a sprite and adds it
  to what `update_graphics()` draws each frame; `detect_input(pressed)` passes
  the space key on to `on_input_detected` when it is held; `close_game()`
  drops the sprites and closes the window.
- `gamebox.sprite.Sprite` is an image with a `position`, a `rotation` and a
  `scale`. Its four corners are recomputed after `rotate`, `translate`,
  `set_position` and whenever `rotation` or `scale` is set; `vertices()`
  returns them as a `Quad` for collision checks, and `copy()` makes an
  independent sprite. Positions given to `translate` and `set_position` are
  in pixels and are stored divided by the image size, so both raise
  `ValueError` on a sprite without a width or height.
- `gamebox.sprite.load_image(path)` builds a sprite from an image file.
- `gamebox.printing` has `print_line`, `debug_print`, `warning_print`,
  `error_print` and `success_print` for coloured terminal messages.
- `gamebox.flappy_bird.FlappyBird` takes an optional random generator
  (`FlappyBird(rng=random.Random(0))`) so that pipe gaps can be reproduced.
- `gamebox.main.main()` is the function behind the `gamebox` command and
  returns its exit status; `gamebox.main.GAMES` maps menu numbers to games.