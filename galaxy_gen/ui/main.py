"""GUI control panel using tkinter."""

import logging
import tkinter as tk
from tkinter import ttk, messagebox, colorchooser, filedialog
from typing import Optional

from matplotlib.colors import to_hex

from galaxy_gen.backends.factory import get_backend
from galaxy_gen.controller import GalaxyController
from galaxy_gen.exceptions import DisposalError, ParameterError
from galaxy_gen.generator.spiral import SpiralGalaxyGenerator
from galaxy_gen.io.snapshot import DEFAULT_SNAPSHOT_NAME
from galaxy_gen.logging_config import setup_logging
from galaxy_gen.render.manager import RenderManager

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16

# field, label, min, max, step, integer
SLIDERS = [
    ("radius", "Galaxy Radius", 0.01, 20.0, 0.01, False),
    ("particle_size", "Star Size", 0.001, 0.1, 0.001, False),
    ("particle_count", "Stars Count", 100, 100000, 100, True),
    ("branch_count", "Galaxy Branches", 2, 20, 1, True),
    ("spin", "Galaxy Spin", -5.0, 5.0, 0.001, False),
    ("randomness", "Scattering", 0.0, 2.0, 0.001, False),
    ("randomness_power", "Curve Trail", 1.0, 10.0, 0.001, False),
]


def _snap(value: float, low: float, step: float, integer: bool):
    snapped = low + round((value - low) / step) * step
    return int(round(snapped)) if integer else round(snapped, 6)


class GalaxyGenGUI:
    """Galaxy controller window; the galaxy itself is shown by matplotlib."""

    def __init__(self, root, backend_name: Optional[str] = None):
        self.root = root
        self.root.title("Galaxy Controller")

        backend = get_backend(backend_name)
        self.manager = RenderManager(mode="3d")
        self.controller = GalaxyController(SpiralGalaxyGenerator(backend), self.manager)
        self.backend_name = backend.name
        self._after_id = None

        self._create_widgets()
        self._setup_layout()

    def _create_widgets(self):
        """Create GUI widgets."""
        self.control_frame = ttk.LabelFrame(self.root, text="Galaxy", padding=10)
        params = self.controller.parameters

        for row, (name, label, low, high, step, integer) in enumerate(SLIDERS):
            ttk.Label(self.control_frame, text=f"{label}:").grid(row=row, column=0, sticky='w', pady=3)
            var = tk.DoubleVar(value=getattr(params, name))
            scale = ttk.Scale(self.control_frame, from_=low, to=high, variable=var,
                              orient='horizontal', length=180)
            scale.grid(row=row, column=1, pady=3)
            value_label = ttk.Label(self.control_frame, text=str(getattr(params, name)), width=8)
            value_label.grid(row=row, column=2, pady=3)

            def on_drag(value, name=name, low=low, step=step, integer=integer, value_label=value_label):
                snapped = _snap(float(value), low, step, integer)
                value_label.config(text=str(snapped))
                self.controller.update(**{name: snapped})

            scale.configure(command=on_drag)
            # Regenerate only once the value settles
            scale.bind("<ButtonRelease-1>", lambda _event: self.commit())

        row = len(SLIDERS)
        self.color_buttons = {}
        for offset, (name, label) in enumerate([("inside_color", "Inside Color"),
                                                ("outside_color", "Outside Color")]):
            ttk.Label(self.control_frame, text=f"{label}:").grid(row=row + offset, column=0, sticky='w', pady=3)
            button = tk.Button(self.control_frame, width=8, bg=to_hex(getattr(params, name)),
                               command=lambda name=name: self.pick_color(name))
            button.grid(row=row + offset, column=1, sticky='w', pady=3)
            self.color_buttons[name] = button
        row += 2

        ttk.Label(self.control_frame, text="Render Mode:").grid(row=row, column=0, sticky='w', pady=5)
        self.render_mode_var = tk.StringVar(value="3d")
        mode_combo = ttk.Combobox(self.control_frame, textvariable=self.render_mode_var,
                                  values=["2d", "3d"], state="readonly", width=8)
        mode_combo.grid(row=row, column=1, sticky='w', pady=5)
        mode_combo.bind("<<ComboboxSelected>>", lambda _event: self.manager.set_mode(self.render_mode_var.get()))

        self.snapshot_button = ttk.Button(self.control_frame, text="Snapshot", command=self.snapshot)
        self.snapshot_button.grid(row=row + 1, column=0, columnspan=3, pady=10, sticky='ew')

        self.status_label = ttk.Label(self.control_frame, text="Ready", foreground="green")
        self.status_label.grid(row=row + 2, column=0, columnspan=3, pady=5)
        ttk.Label(self.control_frame, text=f"Backend: {self.backend_name}").grid(
            row=row + 3, column=0, columnspan=3)

    def _setup_layout(self):
        """Setup window layout."""
        self.control_frame.pack(side='left', fill='y', padx=10, pady=10)

    def pick_color(self, name: str):
        """Ask for a color and regenerate with it."""
        _rgb, hex_color = colorchooser.askcolor(
            color=to_hex(getattr(self.controller.parameters, name)), title="Choose color")
        if hex_color is None:
            return
        self.color_buttons[name].config(bg=hex_color)
        self.controller.update(**{name: hex_color})
        self.commit()

    def commit(self):
        """Regenerate the galaxy from the staged parameters."""
        try:
            self.controller.commit()
        except ParameterError as e:
            self.status_label.config(text="Invalid parameters", foreground="red")
            messagebox.showerror("Error", str(e))
            return
        except DisposalError:
            raise
        except RuntimeError as e:
            logger.warning("Commit skipped: %s", e)
            return
        count = self.controller.parameters.particle_count
        self.status_label.config(text=f"{count} stars", foreground="green")

    def snapshot(self):
        """Save the current view as a PNG."""
        path = filedialog.asksaveasfilename(defaultextension=".png",
                                            initialfile=DEFAULT_SNAPSHOT_NAME,
                                            filetypes=[("PNG image", "*.png")])
        if not path:
            return
        saved = self.controller.snapshot(path)
        self.status_label.config(text=f"Saved {saved.name}", foreground="green")

    def tick(self):
        """Render one frame and schedule the next on the Tk event loop."""
        self.manager.render()
        self._after_id = self.root.after(FRAME_INTERVAL_MS, self.tick)

    def start(self):
        self.commit()
        self.tick()

    def shutdown(self):
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
        self.manager.close()
        self.root.destroy()


def run_gui():
    """Run GUI application."""
    setup_logging()
    root = tk.Tk()
    app = GalaxyGenGUI(root)
    root.protocol("WM_DELETE_WINDOW", app.shutdown)
    app.start()
    root.mainloop()


if __name__ == '__main__':
    run_gui()
