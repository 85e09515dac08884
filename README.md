# channelcore

Self-contained building blocks for the channel side of a role-playing game
server. The package holds pure data structures and calculations with no
dependencies outside the standard library.

## What is inside

- `channelcore.flags` – `Flag`, a fixed-width bit set stored as 32-bit words
  and addressed most-significant-bit first per word. `set_bit`, `set_value`,
  `is_zero` and `words` work on it; `to_bytes` writes the words in order and
  `to_bytes_ex` (also `to_bytes(True)`) writes them last to first, each word
  little-endian.
- `channelcore.limits` – `FieldRectangle` (`inflate`, `is_empty`, `width`,
  `height`) and `calculate_field_limits`, which derives a map's view-range
  limit and its minimum and maximum mob capacity (`FieldLimits`) from its
  footholds, its view range and its mob rate.
- `channelcore.geometry` – `Point`, `Foothold` and `FootholdHistogram`, which
  buckets footholds by x so that `final_position` can settle a point onto the
  nearest foothold below it. `drop_position` does the same for a drop, which
  starts 80 units above its origin.
- `channelcore.portals` – `Portal` and the lookups `portal_by_name`,
  `portal_by_id`, `random_spawn_portal` and `nearest_spawn_portal_id`; a
  failed lookup raises `PortalNotFoundError`.
- `channelcore.names` – the map, job and boss aliases used by GM commands:
  `map_name_to_id`, `job_name_to_id`, `mob_name_to_ids` (raises
  `UnknownMobError`), and `resolve_map_id` / `resolve_job_id`, which accept
  either a number or a name.
- `channelcore.commands` – `parse_gm_command` turns a chat line into a
  `GmCommand`; `parse_rate`, `parse_target_amount` and `decode_packet_hex`
  parse command arguments and raise `CommandError` on bad input.

## Installing

```
pip install .
pip install ".[test]"
```

## Examples

```python
from channelcore.flags import Flag

flag = Flag(64)
flag.set_bit(0, 1)
print(flag.words())              # [2147483648, 0]
print(flag.to_bytes().hex())     # 0000008000000000
print(flag.to_bytes_ex().hex())  # 0000000000000080
```

```python
from channelcore.geometry import Foothold, FootholdHistogram, Point, drop_position
from channelcore.limits import FieldRectangle, calculate_field_limits

floor = Foothold.create(1, -100, 0, 100, 0, 0, 0)
histogram = FootholdHistogram([floor])
print(drop_position(histogram, Point(10, -50)))   # Point(x=10, y=0, foothold=1)

limits = calculate_field_limits([floor], FieldRectangle(0, 0, 0, 0), 1.0)
print(limits.mob_capacity_min, limits.mob_capacity_max)   # 3 6
```

```python
from channelcore.commands import parse_gm_command, parse_rate

command = parse_gm_command("/rate exp 2.5")
print(command.name, command.args)   # rate ('exp', '2.5')
print(parse_rate(command.args))     # ('exp', 2.5)
```

```python
from channelcore.names import mob_name_to_ids, resolve_job_id, resolve_map_id

print(resolve_map_id("henesys"))    # 100000000
print(resolve_map_id("104000000"))  # 104000000
print(resolve_job_id("Hermit"))     # 411
print(mob_name_to_ids("balrog"))    # [8130100]
```

## What this package does not do

It is not a server. There is no networking, no packet building or sending,
no database storage, no timers and no command dispatcher: the command helpers
only parse text, and acting on a parsed command is left to the caller. It
does not track character buffs or manage guilds.

## Running the tests

```
pytest
```