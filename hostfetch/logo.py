"""
Built-in ASCII logos, looked up by distro id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# distro id -> (rich style, art)
LOGOS: Dict[str, Tuple[str, str]] = {
    "arch": ("bold bright_cyan", r"""
       /\
      /  \
     /\   \
    /      \
   /   ,,   \
  /   |  |  -\
 /_-''    ''-_\
"""),
    "debian": ("bold red", r"""
   _____
  /  __ \
 |  /    |
 |  \___-
 -_
   --_
"""),
    "ubuntu": ("bold bright_red", r"""
          _
      ---(_)
  _/  ---  \
 (_) |   |
   \  --- _/
      ---(_)
"""),
    "fedora": ("bold blue", r"""
        ____
       /  __)\
      |  /   \|
   ___|  |__/
  / (_    _)
 |  / |  |
  \___/  |
"""),
    "macos": ("bold green", r"""
        .:'
    __ :'__
 .'`  `-'  ``.
:          .-'
:         :
 :         `-;
  `.__.-.__.'
"""),
    "freebsd": ("bold red", r"""
 /\,-'''''-,/\
 \_)       (_/
 |           |
 |           |
  ;         ;
   '-_____-'
"""),
    "alpine": ("bold blue", r"""
    /\ /\
   // \  \
  //   \  \
 ///    \  \
 //      \  \
          \
"""),
    "manjaro": ("bold green", r"""
 ||||||||| ||||
 ||||||||| ||||
 ||||      ||||
 |||| |||| ||||
 |||| |||| ||||
 |||| |||| ||||
"""),
    "gentoo": ("bold magenta", r"""
   .-----.
 .`    _  `.
 `.   (_)   `.
   `.        /
  .`       .`
 /       .`
 \____.-`
"""),
    "nixos": ("bold bright_blue", r"""
   \\  \\ //
  ==\\__\\/ //
    //   \\//
 ==//     //==
  //\\___//
 // /\\  \\==
   // \\  \\
"""),
    "linux": ("bold white", r"""
     ___
    (.. |
    (<> |
   / __  \
  ( /  \ /|
 _/\ __)/_)
 \/-____\/
"""),
}

# Derivatives that reuse a parent's logo
ALIASES: Dict[str, str] = {
    "endeavouros": "arch",
    "artix": "arch",
    "garuda": "arch",
    "raspbian": "debian",
    "kali": "debian",
    "pop": "ubuntu",
    "linuxmint": "ubuntu",
    "elementary": "ubuntu",
    "nobara": "fedora",
    "rhel": "fedora",
    "centos": "fedora",
    "darwin": "macos",
}


@dataclass
class Logo:
    distro_id: str
    style: str
    lines: List[str] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.lines)

    @property
    def cols(self) -> int:
        return max((len(line) for line in self.lines), default=0)


def get_logo(distro_id: str) -> Logo:
    """Return the logo for *distro_id*, falling back to Tux."""
    key = distro_id.strip().lower()
    key = ALIASES.get(key, key)
    if key not in LOGOS:
        key = "linux"
    style, art = LOGOS[key]
    return Logo(distro_id=key, style=style, lines=art.strip("\n").splitlines())
