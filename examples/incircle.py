"""Example script: a random triangle on a circle with its incircle and centers."""

from geolisp import EvaluateOptions, generate_svg_document, print_values, run_script

TEXT = """
; circumscribed circle of radius 5 at the origin
(setq c (circle))
(setq t (triangle c))
c
t

; triangle centers
(setq i (incenter t))
(setq o (circumcenter t))
(setq h (orthocenter t))
(setq g (centroid t))

; incircle through the incenter
(circle i (inradius t))
(lineseg o h)
"""


def main() -> None:
    values = run_script(TEXT, EvaluateOptions(random_seed=123))
    print(print_values(values), end="")

    svg = generate_svg_document(values)
    print(f"\nSVG ({len(svg)} bytes)")


if __name__ == "__main__":
    main()
