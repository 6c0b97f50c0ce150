"""
Fixed arena and physics constants for Classic Pong

These values define the playing field and are not configurable.
"""

# Canvas
CANVAS_WIDTH = 1080
CANVAS_HEIGHT = 720

# Field margins
TOP_PADDING = 50
LATERAL_PADDING = 20
WALL_SIZE = 9
WALL_SPACING = 12

# Lines the ball bounces against
TOP_WALL_Y = TOP_PADDING + LATERAL_PADDING - 10 + WALL_SIZE
BOTTOM_WALL_Y = CANVAS_HEIGHT - LATERAL_PADDING + 1

# Ball
BALL_RADIUS = 10.0
BALL_INITIAL_SPEED = 0.01
BALL_SPEED_INCREMENT = 0.001
BALL_SPAWN_X = (120.0, 235.0)
BALL_SPAWN_Y = (350.0, 600.0)
BALL_DIRECTION_X = (0.0, 450.0)
BALL_DIRECTION_Y = (-300.0, 300.0)

# Paddles
PADDLE_WIDTH = 25.0
PADDLE_HEIGHT = 105.0
PADDLE_SPEED = 5.0
PADDLE_OFFSET = 20.0

# Paddle track: y is measured from the top of the track, drawn at PADDLE_TRACK_TOP
PADDLE_TRACK_TOP = TOP_PADDING + LATERAL_PADDING
PADDLE_USABLE_HEIGHT = CANVAS_HEIGHT - PADDLE_HEIGHT - TOP_PADDING - 2 * LATERAL_PADDING

PLAYER1_X = LATERAL_PADDING + PADDLE_OFFSET
PLAYER2_X = CANVAS_WIDTH - LATERAL_PADDING - 2 * PADDLE_OFFSET
