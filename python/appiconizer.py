#!/usr/bin/env python3
"""
appiconizer - generate iOS / Android app icons from one source image.

CLI usage:
    python appiconizer.py create --source <file> [--device ios|android|all] [--target <dir>] [--zip]
    python appiconizer.py [--workers N] create ...
    python appiconizer.py --gui

If no command is provided, usage is printed and the exit status is 1.

examples:
    python appiconizer.py create --source icon.png
    python appiconizer.py create --source icon.png --device android --zip
"""

import argparse
import sys

from constants import VERSION, DEFAULT_PROFILE
from icon_pipeline import RunConfig, generate_icons, default_workers
from icon_sizes import PROFILES


def create(source, device=DEFAULT_PROFILE, target=None, archive=False, workers=1):
    """Run the `create` command and return the process exit status."""
    config = RunConfig(workers=workers)
    result = generate_icons(source, target=target, profile=device, archive=archive, config=config)

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        if result.renditions:
            print(
                f"Partial output left in {result.output_path}: {', '.join(result.renditions)}",
                file=sys.stderr,
            )
        return 1

    print(f"Created icons: {result.output_path}")
    return 0


def run_gui(workers=1):
    """Launch GUI mode for icon generation."""
    import tkinter as tk
    from tkinter import filedialog, messagebox, ttk

    root = tk.Tk()
    root.title("appiconizer")
    root.geometry("620x320")

    status_var = tk.StringVar(value="Ready")
    source_var = tk.StringVar()
    target_var = tk.StringVar()
    device_var = tk.StringVar(value=DEFAULT_PROFILE)
    zip_var = tk.BooleanVar(value=False)

    frame = ttk.Frame(root)
    frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

    def choose_source():
        source_file = filedialog.askopenfilename(
            title="Choose source image",
            filetypes=[("Images", "*.png *.jpg *.jpeg *.gif *.bmp"), ("All files", "*.*")],
        )
        if source_file:
            source_var.set(source_file)

    def choose_target():
        target_dir = filedialog.askdirectory(title="Choose target directory")
        if target_dir:
            target_var.set(target_dir)

    ttk.Label(frame, text="Source image:").pack(anchor="w")
    source_row = ttk.Frame(frame)
    source_row.pack(fill=tk.X, pady=(4, 8))
    ttk.Entry(source_row, textvariable=source_var).pack(side=tk.LEFT, fill=tk.X, expand=True)
    ttk.Button(source_row, text="Browse", command=choose_source).pack(side=tk.LEFT, padx=(6, 0))

    ttk.Label(frame, text="Target directory (default: next to the source):").pack(anchor="w")
    target_row = ttk.Frame(frame)
    target_row.pack(fill=tk.X, pady=(4, 8))
    ttk.Entry(target_row, textvariable=target_var).pack(side=tk.LEFT, fill=tk.X, expand=True)
    ttk.Button(target_row, text="Browse", command=choose_target).pack(side=tk.LEFT, padx=(6, 0))

    options_row = ttk.Frame(frame)
    options_row.pack(fill=tk.X, pady=(4, 8))
    ttk.Label(options_row, text="Device:").pack(side=tk.LEFT)
    ttk.Combobox(
        options_row,
        textvariable=device_var,
        values=list(PROFILES),
        state="readonly",
        width=10,
    ).pack(side=tk.LEFT, padx=(6, 12))
    ttk.Checkbutton(options_row, text="Zip files", variable=zip_var).pack(side=tk.LEFT)

    def create_from_gui():
        source_file = source_var.get().strip()
        if not source_file:
            messagebox.showerror("Create", "Please choose a source image.")
            return

        status_var.set("Generating...")
        root.update_idletasks()

        result = generate_icons(
            source_file,
            target=target_var.get().strip() or None,
            profile=device_var.get(),
            archive=zip_var.get(),
            config=RunConfig(workers=workers, report=status_var.set),
        )
        if result.ok:
            status_var.set(f"Created icons: {result.output_path}")
            messagebox.showinfo("Create", f"Icons created successfully:\n{result.output_path}")
        else:
            status_var.set("Create failed")
            messagebox.showerror("Create", f"Error: {result.error}")

    ttk.Button(frame, text="Create icons", command=create_from_gui).pack(anchor="e", pady=(8, 0))

    status_bar = ttk.Label(root, textvariable=status_var, anchor="w")
    status_bar.pack(fill=tk.X, padx=10, pady=(0, 10))

    root.mainloop()


def build_parser():
    parser = argparse.ArgumentParser(
        prog="appiconizer",
        description="Generate app icons for iOS and Android from a single image",
        epilog="example: appiconizer create --source icon.png",
    )
    parser.add_argument("--gui", action="store_true", help="Launch GUI mode")
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument(
        "--workers",
        type=int,
        default=default_workers(),
        metavar="<n>",
        help="Number of threads used to render icons (default: CPU count)",
    )

    subparsers = parser.add_subparsers(dest="command")

    create_parser = subparsers.add_parser("create", help="Create icons from a source image")
    create_parser.add_argument("--source", required=True, metavar="<file>", help="Source file")
    create_parser.add_argument(
        "--device",
        default=DEFAULT_PROFILE,
        metavar="<device>",
        help=f"Target platform: {'/'.join(PROFILES)} (default: {DEFAULT_PROFILE})",
    )
    create_parser.add_argument("--target", metavar="<dir>", help="Target location (default: source directory)")
    create_parser.add_argument("--zip", action="store_true", help="Zip files")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    if args.gui:
        run_gui(workers=args.workers)
        return

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "create":
        status = create(
            args.source,
            device=args.device,
            target=args.target,
            archive=args.zip,
            workers=args.workers,
        )
        if status:
            sys.exit(status)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
