"""Routes for the reading goal page."""

from __future__ import annotations

from flask import current_app, flash, jsonify, redirect, render_template, url_for
from flask_login import current_user, login_required

from ...core.error_handlers import success_response
from ...utils.time_utils import user_today
from . import goals_bp
from .forms import ReadingGoalForm
from .services import GoalProgressService, GoalService
from .view_helpers import build_goal_display


def _render_goal_page(form: ReadingGoalForm, status: int = 200):
    today = user_today()
    snapshot = GoalProgressService.build_progress(current_user.user_id, today=today)
    display = build_goal_display(snapshot)

    return render_template(
        'goals/goal.html',
        form=form,
        display=display,
        snapshot=snapshot,
        year=today.year,
    ), status


@goals_bp.route('/goal', methods=['GET'])
@login_required
def goal_view():
    """Show the reading goal and the progress made this year."""

    form = ReadingGoalForm()
    goal = GoalService.find_current_goal(current_user.user_id, user_today().year)
    if goal is not None:
        form.goal_type.data = goal.goal_type
        form.target.data = goal.target
    return _render_goal_page(form)


@goals_bp.route('/goal', methods=['POST'])
@login_required
def save_goal():
    form = ReadingGoalForm()

    if not form.validate_on_submit():
        current_app.logger.warning("Rejected reading goal form: %s", form.errors)
        flash('Please enter a target of at least 1.', 'error')
        return _render_goal_page(form, status=400)

    GoalService.save_goal(
        current_user.user_id,
        form.goal_type.data,
        form.target.data,
        user_today().year,
    )
    flash('Reading goal saved.', 'success')
    return redirect(url_for('goals.goal_view'))


@goals_bp.route('/goal/reset', methods=['POST'])
@login_required
def reset_goal():
    if GoalService.delete_goal(current_user.user_id, user_today().year):
        flash('Reading goal removed.', 'success')
    return redirect(url_for('goals.goal_view'))


@goals_bp.route('/api/goal/progress', methods=['GET'])
@login_required
def goal_progress_api():
    snapshot = GoalProgressService.build_progress(current_user.user_id, today=user_today())
    if snapshot is None:
        return jsonify(success_response(None, message='Reading goal not set'))

    data = snapshot.to_dict()
    data['display'] = build_goal_display(snapshot)
    return jsonify(success_response(data))
