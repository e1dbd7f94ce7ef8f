# ui/generator_page.py
from __future__ import annotations
import json
from typing import List, Optional

import streamlit as st
import streamlit.components.v1 as components

from core.config import Settings, load_settings
from core.errors import EmptySelection, PasswordError
from core.password_utils import GenerationRequest, generate_batch, selected_classes
from core.strength_utils import score_password

# Passwords held for this browser session until regenerated or cleared
STATE_KEY = "spg_passwords"
# Last message sent to the screen-reader live region
ANNOUNCE_KEY = "spg_announcement"

# Bar colors per strength level
_LEVEL_COLORS = {
    "weak": "#ef4444",
    "medium": "#f59e0b",
    "strong": "#22c55e",
    "very-strong": "#15803d",
}


def render(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    st.subheader("🔐 Password Generator")

    colL, colR = st.columns([3, 2])
    with colL:
        length = st.slider(
            "Password length",
            settings.min_length,
            settings.max_length,
            settings.default_length,
            1,
            key="spg-length-slider",
        )
        count = st.number_input(
            "Quantity", min_value=1, max_value=settings.max_quantity, value=1, step=1, key="spg-quantity"
        )
        show_plain = st.checkbox("Show characters (unmasked)", value=True, key="spg-show-plain")
    with colR:
        st.markdown("**Character sets**")
        use_upper = st.checkbox("A–Z", value=True, key="spg-include-uppercase")
        use_lower = st.checkbox("a–z", value=True, key="spg-include-lowercase")
        use_digits = st.checkbox("0–9", value=True, key="spg-include-numbers")
        use_symbols = st.checkbox("Symbols", value=False, key="spg-include-symbols")

        st.markdown("**Filters**")
        exclude_similar = st.checkbox("Exclude look-alike (i l 1 L o 0 O)", value=True, key="spg-exclude-similar")

    classes = selected_classes(use_lower, use_upper, use_digits, use_symbols)
    if not classes:
        st.warning(str(EmptySelection()))

    colG, colC = st.columns(2)
    with colG:
        gen = st.button("🎲 Generate", type="primary", disabled=not classes, key="spg-generate-button")
    with colC:
        clear = st.button("🧹 Clear", key="spg-clear-button")

    announcement = "" if classes else str(EmptySelection())
    if clear:
        st.session_state[STATE_KEY] = []
        announcement = "Password cleared"
    elif classes and (gen or STATE_KEY not in st.session_state):
        # first visit generates a password right away
        try:
            request = GenerationRequest(int(length), classes, exclude_similar)
            st.session_state[STATE_KEY] = generate_batch(
                request,
                int(count),
                min_length=settings.min_length,
                max_length=settings.max_length,
            )
            announcement = "New password generated"
        except PasswordError as e:
            st.error(f"Generation error: {e}")
            announcement = str(e)

    passwords: List[str] = st.session_state.get(STATE_KEY, [])
    if passwords:
        strength = score_password(passwords[0])
        st.progress(strength.score, text=f"Strength: {strength.label}")
    else:
        st.progress(0, text="Strength: -")

    st.session_state[ANNOUNCE_KEY] = announcement
    _render_table(passwords, bool(show_plain), announcement)


def _render_table(passwords: List[str], show_plain: bool, announcement: str) -> None:
    rows = []
    for p in passwords:
        s = score_password(p)
        rows.append({
            "plain": p,
            "masked": "•" * len(p),
            "label": s.label,
            "level": s.level.value,
            "score": s.score,
            "color": _LEVEL_COLORS[s.level.value],
        })
    frame_height = min(720, 160 + 36 * len(rows))

    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  .pw-shown {{ color: #111827; }}
  @media (prefers-color-scheme: dark) {{
    .pw-shown.pw-plain {{ color: #ef4444; }}
  }}
  table#pwtable {{ border-collapse: collapse; width: 100%; border: 1px solid #e5e7eb; }}
  thead tr {{ background: #f8fafc; }}
  td, th {{ padding: 6px 10px; }}
  @media (prefers-color-scheme: dark) {{
    table#pwtable {{ border-color: #374151; }}
    thead tr {{ background: #111827; color: #e5e7eb; }}
  }}
  .bar {{ height: 6px; border-radius: 3px; background: #e5e7eb; width: 90px; display: inline-block; vertical-align: middle; }}
  .bar > span {{ display: block; height: 100%; border-radius: 3px; }}
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer;
  }}
  #toggle {{
    padding:6px 10px; border:1px solid #d1d5db; border-radius:8px; cursor:pointer; background:#fff;
  }}
  @media (prefers-color-scheme: dark) {{
    #toggle {{ background:#0b0f19; border-color:#374151; color:#e5e7eb; }}
  }}
  .sr-only {{ position:absolute; width:1px; height:1px; overflow:hidden; clip:rect(0,0,0,0); }}
</style>

<div style="font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;">
  <div id="spg-live-region" class="sr-only" aria-live="polite" role="status"></div>
  <div style="display:flex;gap:8px;align-items:center;margin:6px 0 10px;">
    <button id="toggle">{("🙈 Hide" if show_plain else "👁 Show")}</button>
    <span id="hint" style="color:#6b7280;">Passwords never leave this page.</span>
  </div>

  <table id="pwtable">
    <thead>
      <tr>
        <th style="text-align:left;width:40px;">#</th>
        <th style="text-align:left;">Password</th>
        <th style="text-align:left;width:170px;">Strength</th>
        <th style="text-align:right;width:90px;"></th>
      </tr>
    </thead>
    <tbody id="pwbody"></tbody>
  </table>
</div>

<script>
const data = {json.dumps(rows)};
let showPlain = {str(show_plain).lower()};

const tbody = document.getElementById("pwbody");
const toggleBtn = document.getElementById("toggle");
const live = document.getElementById("spg-live-region");

function announce(message) {{
  if (!message) return;
  live.textContent = message;
  setTimeout(() => live.textContent = "", 1000);
}}

function makeRow(idx, item) {{
  const tr = document.createElement("tr");

  const tdIdx = document.createElement("td");
  tdIdx.textContent = String(idx + 1);

  const tdPwd = document.createElement("td");
  tdPwd.style.fontFamily = "ui-monospace,Consolas,Monaco,monospace";
  const shown = document.createElement("span");
  shown.className = "pw-shown" + (showPlain ? " pw-plain" : "");
  shown.dataset.pw = item.plain;
  shown.textContent = showPlain ? item.plain : item.masked;
  tdPwd.appendChild(shown);

  const tdStr = document.createElement("td");
  const bar = document.createElement("span");
  bar.className = "bar";
  const fill = document.createElement("span");
  fill.style.width = item.score + "%";
  fill.style.background = item.color;
  bar.appendChild(fill);
  const lbl = document.createElement("span");
  lbl.className = "spg-strength-" + item.level;
  lbl.style.marginLeft = "8px";
  lbl.textContent = item.label;
  tdStr.appendChild(bar);
  tdStr.appendChild(lbl);

  const tdBtn = document.createElement("td");
  tdBtn.style.textAlign = "right";
  const btn = document.createElement("button");
  btn.className = "cpy";
  btn.textContent = "Copy";
  btn.dataset.pw = item.plain;
  tdBtn.appendChild(btn);

  tr.append(tdIdx, tdPwd, tdStr, tdBtn);
  return tr;
}}

data.forEach((it, i) => tbody.appendChild(makeRow(i, it)));
announce({json.dumps(announcement)});

function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  const ta = document.createElement("textarea");
  ta.value = text;
  ta.style.position = "fixed";
  ta.style.opacity = "0";
  document.body.appendChild(ta);
  ta.focus();
  ta.select();
  try {{ document.execCommand("copy"); }}
  finally {{ document.body.removeChild(ta); }}
  return Promise.resolve();
}}

document.getElementById("pwtable").addEventListener("click", (e) => {{
  const btn = e.target.closest("button.cpy");
  if (!btn) return;
  copyText(btn.dataset.pw || "").then(() => {{
    const old = btn.textContent;
    btn.textContent = "Copied!";
    announce("Password copied to clipboard");
    setTimeout(() => btn.textContent = old, 2000);
  }}).catch(() => {{
    announce("Failed to copy password. Please select and copy manually.");
  }});
}});

toggleBtn.addEventListener("click", () => {{
  showPlain = !showPlain;
  tbody.querySelectorAll(".pw-shown").forEach((shown) => {{
    const pw = shown.dataset.pw;
    shown.textContent = showPlain ? pw : "•".repeat(pw.length);
    shown.classList.toggle("pw-plain", showPlain);
  }});
  toggleBtn.textContent = showPlain ? "🙈 Hide" : "👁 Show";
}});
</script>
        """,
        height=frame_height,
    )
