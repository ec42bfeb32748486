"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- The board (click a cell to move)
- Whose turn it is, or the result
- Theme selection (remembered between runs)
"""

import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

# Logic imports
from logic.game_engine import GameEngine

# Display imports
from display.board_renderer import BoardRenderer
from display.messages import turn_message
from display.palette import palette_for

# Preference imports
from preferences.config import PreferenceConfig
from preferences.preference_store import PreferenceStore
from preferences.theme import Theme


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    BOARD_SIZE = 360

    def __init__(self, preference_store: Optional[PreferenceStore] = None):
        """Initialize the UI."""
        self.engine = GameEngine()
        self.preferences = preference_store or PreferenceStore()
        self.theme = self.preferences.load()
        self.renderer = BoardRenderer(self.theme, size=self.BOARD_SIZE)

        # Create UI
        self._create_ui()
        self._apply_theme(self.theme)
        self._render()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.resizable(False, False)

        self.style = ttk.Style()
        self.style.theme_use('clam')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 5))

        self.turn_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.turn_label.pack(pady=5)

        # Board canvas
        self.board_canvas = tk.Canvas(
            main_frame,
            width=self.BOARD_SIZE,
            height=self.BOARD_SIZE,
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Result message, hidden until the game ends
        self.message_label = ttk.Label(main_frame, text="", style='Message.TLabel')

        # Controls
        self.control_frame = control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        ttk.Label(control_frame, text="Theme:").pack(side=tk.LEFT, padx=(0, 5))

        self.theme_var = tk.StringVar(value=self.theme.value)
        self.theme_select = ttk.Combobox(
            control_frame,
            textvariable=self.theme_var,
            values=PreferenceConfig.THEMES,
            state='readonly',
            width=10
        )
        self.theme_select.pack(side=tk.LEFT, padx=5)
        self.theme_select.bind("<<ComboboxSelected>>", self._on_theme_selected)

        self.restart_btn = tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            width=10,
            command=self._restart_game
        )
        self.restart_btn.pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _apply_theme(self, theme: Theme):
        """Recolour the window and board for a theme."""
        self.theme = theme
        self.theme_var.set(theme.value)
        self.renderer.set_theme(theme)

        palette = palette_for(theme)
        self.root.configure(bg=palette.background)
        self.board_canvas.configure(bg=palette.background)
        self.style.configure('TFrame', background=palette.background)
        self.style.configure('TLabel', background=palette.background,
                             foreground=palette.text, font=('Segoe UI', 11))
        self.style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'),
                             foreground=palette.o_color)
        self.style.configure('Status.TLabel', font=('Segoe UI', 12),
                             foreground=palette.highlight)
        self.style.configure('Message.TLabel', font=('Segoe UI', 14, 'bold'),
                             foreground=palette.x_color)
        self.restart_btn.configure(bg=palette.board, fg=palette.text,
                                   activebackground=palette.grid)

    def _on_theme_selected(self, event=None):
        """Apply and remember the selected theme."""
        theme = Theme.from_name(self.theme_var.get())
        if theme is None:
            return

        self._apply_theme(theme)
        self.preferences.save(theme)
        self._render()

        print(f"Theme set to: {theme.value}")

    def _on_board_click(self, event):
        """Forward a click on a cell to the engine."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        self.engine.apply_move(index)
        self._render()

    def _restart_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.engine.reset()
        self._render()

    def _render(self):
        """Redraw the board and status from the engine state."""
        state = self.engine.state

        photo = ImageTk.PhotoImage(self.renderer.render(state))
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        message = turn_message(state)
        self.turn_label.configure(text=message)

        if state.game_over:
            self.message_label.configure(text=message)
            self.message_label.pack(pady=5, before=self.control_frame)
        else:
            self.message_label.pack_forget()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
