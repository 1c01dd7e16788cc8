from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.auth import get_optional_viewer_id
from app.core.feed import get_user_feed
from app.core.profile_visibility import Visible, view_profile
from app.core.relationships import viewer_relationship
from app.database import get_db
from app.schemas.post_schema import PostOut
from app.schemas.profile_schema import ProfileOut


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(prefix="/profile", tags=["Profiles"])
api_router = APIRouter(prefix="/api/profile", tags=["Profiles"])


# ---------------------------------------------------------------------
# NOT FOUND
# ---------------------------------------------------------------------
def not_found():
    # Same error for "no such user" and "user blocked you"
    return HTTPException(status_code=404, detail="Not found")


# ---------------------------------------------------------------------
# PROFILE PAGE (HTML)
# ---------------------------------------------------------------------
@router.get("/{username}", response_class=HTMLResponse)
def profile_page(
    request: Request,
    username: str,
    db: Session = Depends(get_db),
    viewer_id: Optional[str] = Depends(get_optional_viewer_id),
):
    view = view_profile(db, username, viewer_id)
    if not isinstance(view, Visible):
        raise not_found()

    resolved = view.profile
    user = resolved.user

    posts = [PostOut.model_validate(p) for p in get_user_feed(db, user.username)]

    return templates.TemplateResponse(
        request,
        "profile.html",
        {
            "profile": ProfileOut.from_resolved(resolved),
            "user": user,
            "posts": posts,
            "relationship": viewer_relationship(db, user.id, viewer_id),
            "menu_type": "profile",
        },
    )


# ---------------------------------------------------------------------
# PROFILE (JSON)
# ---------------------------------------------------------------------
@api_router.get("/{username}", response_model=ProfileOut)
def get_profile(
    username: str,
    db: Session = Depends(get_db),
    viewer_id: Optional[str] = Depends(get_optional_viewer_id),
):
    view = view_profile(db, username, viewer_id)
    if not isinstance(view, Visible):
        raise not_found()

    return ProfileOut.from_resolved(view.profile)
