"""Example script: inscribed angles of fixed measure on one circle."""

from geolisp import EvaluateOptions, print_values, run_script

TEXT = """
(setq c (circle (point 1 2) 4))
(setq a (iangle c 40))
(setq b (iangle c 120.5))
a
b
; the triangle spanned by an inscribed angle
(triangle a)
"""


def main() -> None:
    values = run_script(TEXT, EvaluateOptions(random_seed=7))
    print(print_values(values), end="")


if __name__ == "__main__":
    main()
