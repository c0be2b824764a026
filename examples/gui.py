# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import math
import random

from cg2q.pipeline import enclose, points_to_array

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def generate_random_points(n: int):
    """
    Генерує n випадкових точок в одиничному квадраті [0,1]^2.
    Координати - float, у ядрі вони стають точними раціональними.
    """
    return [(random.random(), random.random()) for _ in range(n)]


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y; дозволені дроби виду 1/3.
    Повертає список пар рядків (ядро саме зведе їх до Q).
    """
    points = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        points.append((parts[0], parts[1]))
    if not points:
        raise ValueError("Потрібна щонайменше 1 точка.")
    return points


class EncloseApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("cg2q: hull + min circle")
        self.geometry("700x750")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(
            mode_frame, text="Випадкові точки", variable=self.input_mode,
            value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок", variable=self.input_mode,
            value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        # --- Параметри ---
        input_frame = ttk.LabelFrame(main, text="Параметри")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість випадкових точок:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "50")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Робітників (0 = усі ядра):").grid(row=1, column=0, sticky="w", padx=5, pady=5)
        self.workers_entry = ttk.Entry(input_frame, width=10)
        self.workers_entry.insert(0, "1")
        self.workers_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        # --- Ручний ввід ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)
        self.points_text = tk.Text(manual_frame, height=5, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n2 0\n2 2\n0 2\n1/3 1/2\n")

        ttk.Button(main, text="Побудувати", command=self.run_pipeline).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.vertices_var = tk.StringVar(value="-")
        self.hull_var = tk.StringVar(value="-")
        self.circle_var = tk.StringVar(value="-")

        ttk.Label(result_frame, text="Точок:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.vertices_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Вершин оболонки:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.hull_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Коло:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.circle_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        if self.input_mode.get() == "random":
            self.n_entry.configure(state="normal")
        else:
            self.n_entry.configure(state="disabled")

    def update_plot(self, pts, lower, upper, circle):
        """Точки, оболонка (ламана) і мінімальне коло - у float лише для малювання."""
        self.ax.clear()

        xy = points_to_array(pts)
        self.ax.scatter(xy[:, 0], xy[:, 1], s=8)

        ring = points_to_array(lower + upper[1:])
        self.ax.plot(ring[:, 0], ring[:, 1], linewidth=1.0)

        cx, cy = float(circle.center.x), float(circle.center.y)
        r = math.sqrt(float(circle.r2))
        self.ax.add_patch(CirclePatch((cx, cy), r, fill=False, linestyle="--"))

        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_title("Hull + minimum enclosing circle")
        self.canvas.draw()

    def run_pipeline(self):
        try:
            workers = int(self.workers_entry.get())
        except ValueError:
            messagebox.showerror("Помилка", "Кількість робітників має бути цілим числом.")
            return

        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n <= 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути додатним цілим числом.")
                return
            points = generate_random_points(n)
        else:
            try:
                points = parse_points_from_text(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            pts, lower, upper, circle = enclose(points, workers=workers)
        except (ValueError, ArithmeticError) as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        self.update_plot(pts, lower, upper, circle)

        self.vertices_var.set(str(len(pts)))
        self.hull_var.set(str(max(len(lower) + len(upper) - 2, 1)))
        self.circle_var.set(f"center={circle.center}, r2≈{circle.r2.float_string(6)}")


if __name__ == "__main__":
    app = EncloseApp()
    app.mainloop()
