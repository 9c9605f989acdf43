"""Preset descriptions and TikZ snippets for user convenience."""

DESCRIPTION_PRESETS = {
    "None": "",
    "Right triangle altitude": "Triangle ABC right-angled at A, AB = 3, AC = 4. Draw the altitude AH from A to BC and mark the right angles at A and H.",
    "Inscribed circle": "Triangle ABC with its incircle centred at I, tangent to BC, CA, AB at D, E, F. Label all points.",
    "Square pyramid": "Pyramid S.ABCD with square base ABCD and SA perpendicular to the base. Draw hidden edges dashed.",
}

TIKZ_PRESETS = {
    "None": "",
    "Median": r"""\begin{tikzpicture}
  \coordinate[label=below left:$A$] (A) at (0,0);
  \coordinate[label=below right:$B$] (B) at (4,0);
  \coordinate[label=above:$C$] (C) at (1.5,3);
  \coordinate[label=below:$M$] (M) at ($(A)!0.5!(B)$);
  \draw (A) -- (B) -- (C) -- cycle;
  \draw (C) -- (M);
\end{tikzpicture}""",
    "Projection": r"""\begin{tikzpicture}
  \coordinate[label=below left:$B$] (B) at (0,0);
  \coordinate[label=below right:$C$] (C) at (5,0);
  \coordinate[label=above:$A$] (A) at (1,3);
  \coordinate[label=below:$H$] (H) at ($(B)!(A)!(C)$);
  \draw (A) -- (B) -- (C) -- cycle;
  \draw (A) -- (H);
  \pic[draw, angle radius=2mm] {right angle = A--H--C};
\end{tikzpicture}""",
}

__all__ = ["DESCRIPTION_PRESETS", "TIKZ_PRESETS"]
