from .constants.player_constants import ALL_LAYERS, CONTACT_SKIN


class AnalysisConfig:
    def __init__(
        self,
        collision_layer_mask: int = ALL_LAYERS,
        contact_skin: float = CONTACT_SKIN,
        render_path: str = None,
        render_size: tuple = (800, 600),
        draw_jump_arcs: bool = True,
        debug: bool = False,
    ):
        self.collision_layer_mask = collision_layer_mask
        self.contact_skin = contact_skin
        self.render_path = render_path
        self.render_size = render_size
        self.draw_jump_arcs = draw_jump_arcs
        self.debug = debug

    def includes_layer(self, layer: int) -> bool:
        """Whether solids on the given layer take part in the analysis."""
        return ((1 << layer) & self.collision_layer_mask) != 0

    @classmethod
    def from_args(cls, args=None):
        config = cls()
        if args is None:
            return config
        config.collision_layer_mask = args.layer_mask
        config.render_path = args.render
        config.render_size = (args.width, args.height)
        config.draw_jump_arcs = not args.no_arcs
        config.debug = args.verbose
        return config
