# battleships

The start of a Battleships game on pygame. The `battleships` command
opens an 800×600 window with the caption "Battleships". The window shows
the title "Battleships" centred on a black background, drawn at four
times its size. It also shows the ship image from `assets/ship.png` in
the top-left corner.

## Installing

```
pip install .
```

You need Python 3.10 or later. pygame is installed with the package.

## Running

```
battleships
```

`python -m battleships.app` does the same thing.

Run the command from a directory that contains `assets/ship.png`, because
the path is relative to the working directory. If the image cannot be
loaded, an error is logged and the title is drawn without the ship.

Closing the window ends the game. The command exits with status 0. It
exits with status 1 if the display cannot be set up or the window cannot
be created.

## What it does not do

There is no game yet. The package has no board, no ship placement, no
shooting and no opponent. The title scene does not react to the mouse or
the keyboard. The only event the window responds to is being closed.

## Modules

### `battleships.scenes`

A scene is a set of optional callbacks for initialisation, rendering and
event handling. A callback that is not set does nothing when it is
invoked. Only one scene is current at a time.

```python
from battleships.scenes import SceneBuilder, set_current_scene, get_current_scene

scene = (
    SceneBuilder()
    .with_init(lambda: print("ready"))
    .with_render(lambda: None)
    .with_event(lambda event: print(event))
    .build()
)

set_current_scene(scene)        # makes it current and runs its init callback
get_current_scene().on_render()
```

`set_current_scene(None)` clears the current scene.

### `battleships.game`

`Game` holds the window surface. `Game.init(window)` creates the single
instance. Later calls to `Game.init` have no effect. `Game.instance()`
returns the instance, or `None` before `init` has been called. The
instance's `window` property gives the surface.

### `battleships.texture`

`Texture.load(path)` loads an image file into a `Texture`. The texture
has a `surface`, a `size`, and placement fields: `pos_x`, `pos_y`,
`scale_x` and `scale_y`. If the file cannot be loaded, `load` raises
`TextureLoadError`, which is a subclass of `OSError`.

### `battleships.main_scene`

`create_main_scene()` builds the title scene. The scene draws to the
window of the initialised `Game`.

`title_position(width, height)` returns the top-left corner of the
title in the scaled coordinates. The title is centred for a window of
that size.

### `battleships.app`

`main()` runs the game and returns the exit status.

`handle_event(event)` returns `AppResult.SUCCESS` for a quit event.
Any other event is passed to the current scene, and the function returns
`AppResult.CONTINUE`.

## Tests

```
pip install .[test]
pytest
```