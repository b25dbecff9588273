from dtpredict.core.outcomes import Mode, Outcome

_ALIASES = {
    Outcome.DRAGON: ("d", "dragon", "rong", "rồng", "long"),
    Outcome.TIGER: ("t", "tiger", "ho", "hổ", "hu"),
    Outcome.TIE: ("x", "tie", "hoa", "hoà", "hòa", "draw"),
}
_SHORT = {"d": Outcome.DRAGON, "t": Outcome.TIGER, "x": Outcome.TIE}


def parse_outcome(token: str) -> Outcome | None:
    t = (token or "").strip().lower()
    if not t:
        return None
    for outcome, names in _ALIASES.items():
        if t in names:
            return outcome
    return None


def parse_bulk(s: str) -> list[Outcome]:
    seps = [",", ";", "|", "/", "\\", "\n", "\t", " "]
    for sp in seps[1:]:
        s = s.replace(sp, seps[0])
    out = []
    for tk in (x for x in s.split(seps[0]) if x.strip() != ""):
        lab = parse_outcome(tk)
        if lab is not None:
            out.append(lab)
        elif set(tk.strip().lower()) <= set(_SHORT):
            # compact run such as "DDTX"
            out.extend(_SHORT[c] for c in tk.strip().lower())
    return out


def parse_mode(name: str) -> Mode | None:
    t = (name or "").strip().lower()
    for mode in Mode:
        if mode.value.lower() == t:
            return mode
    return None
