"""Example script: deterministic segment and circle intersections."""

from geolisp import print_values, run_script

TEXT = """
(setq c (circle (point 0 0) 5))
(setq l (lineseg (point -10 0) (point 10 0)))
(setq m (lineseg (point 3 -10) (point 3 10)))

; chord endpoints
(setq p (intersect l c 0))
(setq q (intersect l c 1))
(setq r (intersect m c 0))

(intersect l m)
(midpoint p r)
(angle q p r)
(/ (* 7 3) 2)
"""


def main() -> None:
    values = run_script(TEXT)
    print(print_values(values), end="")


if __name__ == "__main__":
    main()
