from typing import List, Tuple

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from featuregen.schemas import BoardResponse, FeatureDescriptor, GenerateRequest, GenerateResponse
from featuregen.ui.page import render_page


router = APIRouter()


def run_submission(request: Request, requirements: str) -> Tuple[int, bool, List[FeatureDescriptor]]:
    """
    Push one submission through the board.

    Returns (sequence, ok, features). Every generation failure collapses
    into ok=False with an empty list; the board is never left loading
    for the latest submission.
    """
    board = request.app.state.board
    generator = request.app.state.generator

    sequence = board.begin(requirements)
    try:
        features = generator.run(requirements)
    except Exception as e:
        # FeatureGenerationError and anything unexpected end the same way
        board.fail(sequence, e)
        return sequence, False, []

    board.complete(sequence, features)
    return sequence, True, features


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return render_page(request.app.state.board.snapshot())


@router.post("/generate", response_class=HTMLResponse)
def generate_page(request: Request, requirements: str = Form("")):
    run_submission(request, requirements)
    return render_page(request.app.state.board.snapshot())


@router.post("/api/features", response_model=GenerateResponse)
def generate_features(request: Request, payload: GenerateRequest):
    sequence, ok, features = run_submission(request, payload.requirements or "")
    return GenerateResponse(
        status="success" if ok else "error",
        sequence=sequence,
        features=features,
    )


@router.get("/api/board", response_model=BoardResponse)
def board_state(request: Request):
    return request.app.state.board.snapshot().to_dict()


@router.get("/health")
def health():
    return {"status": "ok"}
