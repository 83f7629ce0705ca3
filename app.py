"""
Web application for the two-vehicle kinematic simulation

Interactive dashboard to run a rollout with constant controls and visualize
the vehicle trajectories.
"""

import logging
from typing import Any, Dict, List

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import numpy as np
import plotly.graph_objs as go

from bicycle_sim import (
    BoundedEnvironment,
    ConfigurationError,
    Simulator,
    SimulatorConfig,
    Trajectory,
)
from bicycle_sim.environment import DEFAULT_SCENARIOS

logger = logging.getLogger(__name__)

INPUT_STYLE = {'width': '100%', 'padding': '8px'}
LABEL_STYLE = {'fontWeight': 'bold', 'marginBottom': '5px'}
COLUMN_STYLE = {'width': '15%', 'display': 'inline-block', 'marginRight': '1%'}


def labelled_input(label: str, input_id: str, value: float, step: float) -> html.Div:
    return html.Div([
        html.Label(label, style=LABEL_STYLE),
        dcc.Input(id=input_id, type='number', value=value, step=step, style=INPUT_STYLE),
    ], style=COLUMN_STYLE)


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Two-Vehicle Kinematic Simulation"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Two-Vehicle Kinematic Simulation",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                html.Label("Scenario:", style=LABEL_STYLE),
                dcc.Dropdown(
                    id='scenario-input',
                    options=[{'label': f"Scenario {s}", 'value': s} for s in DEFAULT_SCENARIOS],
                    value=1,
                    clearable=False,
                ),
            ], style=COLUMN_STYLE),
            labelled_input("Ego accel (m/s²):", 'ego-accel-input', 0.0, 0.1),
            labelled_input("Ego steer (rad):", 'ego-psi-input', 0.0, 0.01),
            labelled_input("Obstacle accel (m/s²):", 'obstacle-accel-input', 0.0, 0.1),
            labelled_input("Obstacle steer (rad):", 'obstacle-psi-input', 0.0, 0.01),
            labelled_input("Time step (s):", 'dt-input', 0.1, 0.01),
        ], style={'marginBottom': '15px'}),

        html.Div([
            labelled_input("Steps:", 'steps-input', 100, 1),
            html.Button('Run Simulation', id='run-button',
                        style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                               'backgroundColor': '#4CAF50', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


def run_constant_control(
    scenario: int, controls: List[float], dt: float, steps: int
) -> tuple[Simulator, Trajectory]:
    """
    Roll out a scenario with the same actions at every step

    Args:
        scenario: Scenario id of the bounded environment
        controls: [acc_ego, psi_ego, acc_obstacle, psi_obstacle]
        dt: Time step (s)
        steps: Maximum number of steps

    Returns:
        Tuple of (simulator after the rollout, trajectory)
    """
    config = SimulatorConfig(dt=dt, trajectory_length=steps, scenario=scenario)
    simulator = Simulator(config, BoundedEnvironment())
    trajectory = simulator.rollout(lambda state: controls)
    return simulator, trajectory


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [
        State("scenario-input", "value"),
        State("ego-accel-input", "value"),
        State("ego-psi-input", "value"),
        State("obstacle-accel-input", "value"),
        State("obstacle-psi-input", "value"),
        State("dt-input", "value"),
        State("steps-input", "value"),
    ],
)
def update_results(
    n_clicks: int | None,
    scenario: int,
    ego_accel: float,
    ego_psi: float,
    obstacle_accel: float,
    obstacle_psi: float,
    dt: float,
    steps: int,
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    controls = [ego_accel, ego_psi, obstacle_accel, obstacle_psi]
    if any(value is None for value in controls + [dt, steps]):
        return [], html.Div("Error: All inputs are required.", style={"color": "red"})

    if abs(ego_psi) >= np.pi / 2 or abs(obstacle_psi) >= np.pi / 2:
        return [], html.Div(
            "Error: Steering angles must be between -pi/2 and pi/2 rad.",
            style={"color": "red"},
        )

    try:
        simulator, trajectory = run_constant_control(scenario, controls, dt, int(steps))
    except (ConfigurationError, ValueError) as e:
        logger.warning("Simulation rejected: %s", e)
        return [], html.Div(f"Error: {e}", style={"color": "red"})

    outcome = "terminated" if trajectory.terminal else "ran to completion"
    status_msg = html.Div(
        f"Simulation {outcome} after {len(trajectory)} steps.",
        style={"color": "green"},
    )
    return create_results_layout(simulator, trajectory), status_msg


def create_results_layout(simulator: Simulator, trajectory: Trajectory) -> html.Div:
    """Create the results visualization layout"""
    states = trajectory.states
    steps = np.arange(len(states))

    # 1. Paths with final footprints
    fig1 = go.Figure()
    fig1.add_trace(
        go.Scatter(
            x=states[:, 0] * simulator.scale,
            y=states[:, 1] * simulator.scale,
            mode="lines",
            name="Ego path",
            line=dict(color="royalblue", width=2),
        )
    )
    fig1.add_trace(
        go.Scatter(
            x=states[:, 4] * simulator.scale,
            y=states[:, 5] * simulator.scale,
            mode="lines",
            name="Obstacle path",
            line=dict(color="firebrick", width=2),
        )
    )
    fig1.add_trace(simulator.draw_ego_vehicle(name="Ego", fillcolor="rgba(65,105,225,0.5)",
                                              line=dict(color="royalblue")))
    fig1.add_trace(simulator.draw_obstacle_vehicle(name="Obstacle",
                                                   fillcolor="rgba(178,34,34,0.5)",
                                                   line=dict(color="firebrick")))
    fig1.update_layout(
        title="Vehicle Paths",
        xaxis_title="x",
        yaxis_title="y",
        yaxis=dict(scaleanchor="x", scaleratio=1, autorange="reversed"),
        hovermode="closest",
        height=600,
        template="plotly_white",
    )

    # 2. Velocities
    fig2 = go.Figure()
    for index, name, color in ((3, "Ego", "royalblue"), (7, "Obstacle", "firebrick")):
        fig2.add_trace(
            go.Scatter(
                x=steps,
                y=states[:, index],
                mode="lines",
                name=name,
                line=dict(color=color, width=2),
                hovertemplate=f"{name}<br>Step: %{{x}}<br>Velocity: %{{y:.2f}} m/s<extra></extra>",
            )
        )
    fig2.update_layout(
        title="Velocity",
        xaxis_title="Step",
        yaxis_title="Velocity (m/s)",
        height=400,
        template="plotly_white",
    )

    # 3. Rewards
    fig3 = go.Figure()
    fig3.add_trace(
        go.Bar(
            x=steps[:-1],
            y=trajectory.rewards,
            marker_color=["red" if r < 0 else "green" for r in trajectory.rewards],
            hovertemplate="Step: %{x}<br>Reward: %{y:.3f}<extra></extra>",
        )
    )
    fig3.update_layout(
        title="Reward per Step",
        xaxis_title="Step",
        yaxis_title="Reward",
        height=400,
        template="plotly_white",
    )

    summary: Dict[str, Any] = {
        "Steps": len(trajectory),
        "Terminal": "Yes" if trajectory.terminal else "No",
        "Total Reward": f"{trajectory.total_reward:.3f}",
        "Final Ego State": ", ".join(f"{v:.2f}" for v in states[-1, :4]),
        "Final Obstacle State": ", ".join(f"{v:.2f}" for v in states[-1, 4:]),
    }
    table_rows = [html.Tr([html.Th(key), html.Td(value)]) for key, value in summary.items()]

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([
                html.Div(
                    [dcc.Graph(figure=fig2)],
                    style={"width": "48%", "display": "inline-block", "marginRight": "2%"},
                ),
                html.Div(
                    [dcc.Graph(figure=fig3)],
                    style={"width": "48%", "display": "inline-block"},
                ),
            ], style={"marginBottom": "30px"}),
        ]),
    ])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, port=8050)
