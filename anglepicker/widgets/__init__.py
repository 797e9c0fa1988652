from anglepicker.widgets.angle_picker import AnglePicker
