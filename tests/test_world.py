from kinki.entities import Boss, Enemy, GameState, Player
from kinki.settings import (
    ENEMY_HEALTH,
    PLAY_WD_WIDTH,
    SHOOT_INTERVAL,
    WAVE_BULLET_MAX,
    BulletType,
)
from kinki.world import update_bullets, update_enemies, update_objects, update_player


def test_player_moves_up():
    player = Player(x=100, y=500)
    player.move.up = True
    update_player(player)
    assert player.y == 500 - player.speed
    assert player.x == 100


def test_player_blocked_at_top_and_right():
    player = Player(x=PLAY_WD_WIDTH - 50, y=0, width=50)
    player.move.up = True
    player.move.right = True
    update_player(player)
    assert (player.x, player.y) == (PLAY_WD_WIDTH - 50, 0)


def test_opposite_keys_cancel():
    player = Player(x=100, y=500)
    player.move.left = True
    player.move.right = True
    update_player(player)
    assert player.x == 100


def test_enemy_moves_and_bounces():
    moving = Enemy(x=100, y=10)
    edge = Enemy(x=PLAY_WD_WIDTH - 51, y=10, width=50)
    dead = Enemy(x=100, y=10, health=0)
    update_enemies([moving, edge, dead])
    assert moving.x == 100 + moving.speed
    assert moving.direction == 1
    assert edge.direction == -1
    assert dead.x == 100


def test_update_bullets_dispatches_wave():
    state = GameState(player=Player(x=200, y=800, bullet_type=BulletType.WAVE), boss=Boss(), enemies=[])
    state.player.move.shoot = True
    state.shoot_interval = SHOOT_INTERVAL
    update_bullets(state)
    assert len(state.bullets) == WAVE_BULLET_MAX


def test_update_objects_advances_everything():
    enemy = Enemy(x=100, y=10)
    state = GameState(player=Player(x=200, y=800), boss=Boss(), enemies=[enemy])
    state.player.move.left = True
    update_objects(state)
    assert state.player.x == 200 - state.player.speed
    assert enemy.x == 100 + enemy.speed
    assert len(state.enemy_bullets) == 1
    assert enemy.health == ENEMY_HEALTH