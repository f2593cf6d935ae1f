# Mansion/perception.py
from __future__ import annotations
from typing import List, Optional, Sequence

from Mansion.house import Room
from Mansion.clues import ClueNode, iter_clues
from Mansion.events import Event
from Mansion.results import StepResult
from Mansion.verdict import Verdict
from Mansion.engine import MOVE_LEFT, MOVE_RIGHT, EXIT

OUTCOME_TEXT = {
    "sustainable_accusation": "As provas sustentam a acusação. Caso encerrado!",
    "insufficient_single_clue": "Apenas uma pista aponta para esse suspeito. Provas insuficientes.",
    "unsupported_accusation": "Nenhuma pista aponta para esse suspeito. Acusação sem fundamento.",
    "insufficient_no_evidence": "Nenhuma pista foi coletada. Não há como sustentar a acusação.",
}


def render_room(room: Room, res: StepResult, *, show_clues: bool = True, show_suspects: bool = True) -> str:
    out: List[str] = []
    out.append(f"\n📍 Você está em: {room.name}")

    if show_clues:
        clue = res.data.get("clue")
        if clue:
            out.append(f"🧩 Você encontrou uma pista: \"{clue}\"")
            if show_suspects:
                suspect = res.data.get("suspect")
                out.append(f"   Ela aponta para: {suspect}" if suspect else "   Ela não aponta para nenhum suspeito conhecido.")
        else:
            out.append("Nada interessante aqui...")

    moves = res.data.get("moves", [])
    if moves:
        out.append(render_moves(room, moves))
    return "\n".join(out)


def render_moves(room: Room, moves: List[str]) -> str:
    out = ["\nEscolha o próximo caminho:"]
    if MOVE_LEFT in moves and room.left is not None:
        out.append(f"  [{MOVE_LEFT}] Ir para a esquerda ({room.left.name})")
    if MOVE_RIGHT in moves and room.right is not None:
        out.append(f"  [{MOVE_RIGHT}] Ir para a direita ({room.right.name})")
    if EXIT in moves:
        out.append(f"  [{EXIT}] Sair da mansão")
    return "\n".join(out)


def render_clues(root: Optional[ClueNode]) -> str:
    out = ["\n===== Pistas Coletadas (em ordem alfabética) ====="]
    texts = list(iter_clues(root))
    if not texts:
        out.append("Nenhuma pista foi coletada!")
    for text in texts:
        out.append(f"🔎 {text}")
    return "\n".join(out)


def render_path(names: List[str]) -> str:
    return "Caminho percorrido: " + (" -> ".join(names) if names else "(nenhum)")


def render_log(events: Sequence[Event]) -> str:
    """Investigation diary: moves, clues (with their suspect when known) and how the walk ended."""
    out = ["\n===== Diário da Investigação ====="]
    for ev in events:
        if ev.type == "move":
            out.append(f"[{ev.turn}] {ev.args['src']} -> {ev.args['dst']}")
        elif ev.type == "clue":
            line = f"[{ev.turn}] {ev.room}: \"{ev.args['clue']}\""
            if ev.args.get("suspect"):
                line += f" (suspeito: {ev.args['suspect']})"
            out.append(line)
        elif ev.type in ("exit", "leaf_exit"):
            out.append(f"[{ev.turn}] Saída em {ev.room}")
    if len(out) == 1:
        out.append("(vazio)")
    return "\n".join(out)


def render_verdict(verdict: Verdict) -> str:
    out = ["\n===== Veredito ====="]
    out.append(f"Acusado: {verdict.accused}")
    out.append(f"Pistas que o incriminam: {verdict.count}")
    out.append(OUTCOME_TEXT[verdict.outcome])
    return "\n".join(out)
